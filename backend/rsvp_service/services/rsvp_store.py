"""Record store — durable CRUD for the `rsvp` table.

Every function takes the caller's Session, commits its own work and hands
back frozen ``RSVPRecord`` snapshots rather than live ORM instances, so the
result can outlive the session (and sit in the cache). Any SQLAlchemy
failure rolls the session back and is re-raised as ``StorageError``.
"""
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rsvp_service.errors import RecordNotFoundError, StorageError
from rsvp_service.models.rsvp import RSVP
from rsvp_service.schemas.rsvp import RSVPRecord

logger = logging.getLogger(__name__)


def _to_record(row: RSVP) -> RSVPRecord:
    return RSVPRecord(
        rsvp_id=row.rsvp_id,
        guest_name=row.guest_name,
        total_attending=row.total_attending,
    )


@contextmanager
def _storage_errors(db: Session, action: str) -> Iterator[None]:
    """Roll back and translate SQLAlchemy failures into StorageError.

    OverflowError is raised by the DB-API driver itself (an int wider than
    the column type) and reaches us unwrapped by SQLAlchemy.
    """
    try:
        yield
    except (SQLAlchemyError, OverflowError) as exc:
        db.rollback()
        logger.exception("Storage failure while trying to %s", action)
        raise StorageError(f"Could not {action}: {exc.__class__.__name__}") from exc


def create(db: Session, guest_name: str, total_attending: int) -> RSVPRecord:
    """Insert a new row; the database assigns rsvp_id."""
    with _storage_errors(db, "create RSVP"):
        row = RSVP(guest_name=guest_name, total_attending=total_attending)
        db.add(row)
        db.commit()
        db.refresh(row)
        return _to_record(row)


def fetch(db: Session, rsvp_id: int) -> Optional[RSVPRecord]:
    """Return the current record for rsvp_id, or None if there is none."""
    with _storage_errors(db, f"fetch RSVP {rsvp_id}"):
        row = db.query(RSVP).filter(RSVP.rsvp_id == rsvp_id).first()
        return _to_record(row) if row is not None else None


def fetch_all(db: Session) -> list[RSVPRecord]:
    """Return every current record, ordered by id."""
    with _storage_errors(db, "list RSVPs"):
        return [_to_record(row) for row in db.query(RSVP).order_by(RSVP.rsvp_id).all()]


def update(db: Session, rsvp_id: int, guest_name: str, total_attending: int) -> RSVPRecord:
    """Overwrite both fields of an existing row.

    Raises RecordNotFoundError when rsvp_id is not in the store.
    """
    with _storage_errors(db, f"update RSVP {rsvp_id}"):
        row = db.query(RSVP).filter(RSVP.rsvp_id == rsvp_id).first()
        if row is None:
            raise RecordNotFoundError(rsvp_id)
        row.guest_name = guest_name
        row.total_attending = total_attending
        db.commit()
        db.refresh(row)
        return _to_record(row)


def delete(db: Session, rsvp_id: int) -> bool:
    """Delete the row if present. Returns whether a row was removed."""
    with _storage_errors(db, f"delete RSVP {rsvp_id}"):
        removed = db.query(RSVP).filter(RSVP.rsvp_id == rsvp_id).delete(synchronize_session=False)
        db.commit()
        return removed > 0
