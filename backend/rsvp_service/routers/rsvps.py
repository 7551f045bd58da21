"""RSVP API routes — delegates to rsvp_service for cache handling."""
import logging
from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from rsvp_service.database import get_db
from rsvp_service.models.rsvp import INTEGER_MAX
from rsvp_service.schemas.rsvp import RSVPCreate, RSVPRecord, RSVPUpdate
from rsvp_service.services import rsvp_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=RSVPRecord, status_code=status.HTTP_201_CREATED)
def create_rsvp(payload: RSVPCreate, db: Session = Depends(get_db)):
    """Create an RSVP; the store assigns its id."""
    return rsvp_service.create_rsvp(db, payload)


@router.get("", response_model=list[RSVPRecord])
def list_rsvps(db: Session = Depends(get_db)):
    """List every RSVP, always read straight from the database."""
    return rsvp_service.list_rsvps(db)


@router.get("/{rsvp_id}", response_model=RSVPRecord)
def get_rsvp(
    rsvp_id: int = Path(..., ge=1, le=INTEGER_MAX),
    db: Session = Depends(get_db),
):
    """Fetch a single RSVP, served from the cache when possible."""
    record = rsvp_service.get_rsvp(db, rsvp_id)
    if record is None:
        raise HTTPException(status_code=404, detail="RSVP not found")
    return record


@router.put("/{rsvp_id}", response_model=RSVPRecord)
def update_rsvp(
    payload: RSVPUpdate,
    rsvp_id: int = Path(..., ge=1, le=INTEGER_MAX),
    db: Session = Depends(get_db),
):
    """Replace both fields of an RSVP. An id in the body must match the path."""
    if payload.rsvp_id is not None and payload.rsvp_id != rsvp_id:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Body id {payload.rsvp_id} does not match path id {rsvp_id}",
        )
    return rsvp_service.update_rsvp(db, rsvp_id, payload)


@router.put("", response_model=RSVPRecord)
def update_rsvp_by_body(payload: RSVPUpdate, db: Session = Depends(get_db)):
    """Replace both fields of the RSVP whose id is embedded in the body."""
    if payload.rsvp_id is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Body must carry the id of the RSVP to update",
        )
    return rsvp_service.update_rsvp(db, payload.rsvp_id, payload)


@router.delete("/{rsvp_id}", status_code=status.HTTP_200_OK)
def delete_rsvp(
    rsvp_id: int = Path(..., ge=1, le=INTEGER_MAX),
    db: Session = Depends(get_db),
):
    """Delete an RSVP. Deleting an unknown id still succeeds."""
    removed = rsvp_service.delete_rsvp(db, rsvp_id)
    return {"status": "ok", "id": rsvp_id, "deleted": removed}
