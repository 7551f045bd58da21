"""Pydantic schemas for RSVPs.

JSON bodies use camelCase (``guestName``, ``totalAttending``); Python code
uses the snake_case field names. ``RSVPRecord`` is frozen because instances
are shared through the process-wide cache.
"""
from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from rsvp_service.models.rsvp import GUEST_NAME_MAX_LENGTH, INTEGER_MAX

_CAMEL = {"alias_generator": to_camel, "populate_by_name": True}


class RSVPIn(BaseModel):
    guest_name: str = Field(min_length=1, max_length=GUEST_NAME_MAX_LENGTH)
    total_attending: int = Field(ge=0, le=INTEGER_MAX)

    model_config = _CAMEL


class RSVPCreate(RSVPIn):
    pass


class RSVPUpdate(RSVPIn):
    # Only read by PUT /rsvps, where the id travels in the body
    rsvp_id: Optional[int] = Field(default=None, alias="id", ge=1, le=INTEGER_MAX)


class RSVPRecord(BaseModel):
    rsvp_id: int = Field(alias="id")
    guest_name: str
    total_attending: int

    model_config = {**_CAMEL, "from_attributes": True, "frozen": True}


class CacheStats(BaseModel):
    size: int
    hits: int
    misses: int
    evictions: int
