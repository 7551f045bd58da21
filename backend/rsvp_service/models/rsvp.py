"""RSVP ORM model — the single `rsvp` table."""
from sqlalchemy import Column, Integer, String
from rsvp_service.database import Base

GUEST_NAME_MAX_LENGTH = 50
# Largest value an INTEGER column holds on every supported backend
INTEGER_MAX = 2**31 - 1


class RSVP(Base):
    __tablename__ = "rsvp"
    __table_args__ = {"sqlite_autoincrement": True}

    rsvp_id = Column(Integer, primary_key=True, autoincrement=True)
    guest_name = Column(String(GUEST_NAME_MAX_LENGTH), nullable=False)
    total_attending = Column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<RSVP {self.rsvp_id} {self.guest_name!r} x{self.total_attending}>"
