"""Domain exceptions raised by the store and the RSVP service."""


class RSVPError(Exception):
    """Base class for every error this service raises on purpose."""


class StorageError(RSVPError):
    """Connectivity failure, constraint violation or other persistence failure."""


class RecordNotFoundError(StorageError):
    """A write targeted an rsvp_id that is not in the store."""

    def __init__(self, rsvp_id: int):
        super().__init__(f"RSVP {rsvp_id} does not exist")
        self.rsvp_id = rsvp_id


class InvalidRSVPError(RSVPError):
    """Required field missing or malformed; raised before the store is touched."""

    def __init__(self, errors: list[dict]):
        super().__init__("Invalid RSVP payload")
        self.errors = errors
