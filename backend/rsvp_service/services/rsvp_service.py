"""RSVP service — composes the record store with the cache-aside layer.

Cache touch-points:
- create:  store only; the next get-one populates the cache
- get-one: cache.get_or_load, falling back to store.fetch
- get-all: store.fetch_all, never reads or fills the cache
- update / delete: store write, then evict, both under the id's lock
"""
import logging
from typing import Any, Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session

from rsvp_service.errors import InvalidRSVPError
from rsvp_service.schemas.rsvp import RSVPIn, RSVPRecord
from rsvp_service.services import rsvp_store
from rsvp_service.services.rsvp_cache import rsvp_cache

logger = logging.getLogger(__name__)


def _validated(payload: Any) -> RSVPIn:
    """Accept an RSVPIn (already validated) or a mapping to validate."""
    if isinstance(payload, RSVPIn):
        return payload
    try:
        return RSVPIn.model_validate(payload)
    except ValidationError as exc:
        raise InvalidRSVPError(exc.errors(include_url=False)) from exc


def create_rsvp(db: Session, payload: Any) -> RSVPRecord:
    data = _validated(payload)
    record = rsvp_store.create(db, data.guest_name, data.total_attending)
    logger.info("Created RSVP %s for '%s' (%d attending)",
                record.rsvp_id, record.guest_name, record.total_attending)
    return record


def get_rsvp(db: Session, rsvp_id: int) -> Optional[RSVPRecord]:
    """Return the RSVP or None. Store failures on a miss propagate."""
    return rsvp_cache.get_or_load(rsvp_id, lambda key: rsvp_store.fetch(db, key))


def list_rsvps(db: Session) -> list[RSVPRecord]:
    return rsvp_store.fetch_all(db)


def update_rsvp(db: Session, rsvp_id: int, payload: Any) -> RSVPRecord:
    """Overwrite an RSVP. Raises RecordNotFoundError for an unknown id."""
    data = _validated(payload)
    with rsvp_cache.writing(rsvp_id):
        record = rsvp_store.update(db, rsvp_id, data.guest_name, data.total_attending)
    logger.info("Updated RSVP %s", rsvp_id)
    return record


def delete_rsvp(db: Session, rsvp_id: int) -> bool:
    """Delete an RSVP; deleting an unknown id is not an error."""
    with rsvp_cache.writing(rsvp_id):
        removed = rsvp_store.delete(db, rsvp_id)
    if removed:
        logger.info("Deleted RSVP %s", rsvp_id)
    else:
        logger.info("Delete of RSVP %s was a no-op; no such record", rsvp_id)
    return removed
