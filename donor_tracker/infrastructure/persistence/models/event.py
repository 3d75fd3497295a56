"""Event ORM model. Fundraising event donors are invited to."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from donor_tracker.infrastructure.persistence.database import Base
from donor_tracker.infrastructure.persistence.models.mixins import CreatedAtMixin


class Event(CreatedAtMixin, Base):
    """Insert-only event record. Table: events."""

    __tablename__ = "events"
    # AUTOINCREMENT: ids are never reused, even after the newest row is removed.
    __table_args__ = {"sqlite_autoincrement": True}

    event_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    location: Mapped[str | None] = mapped_column(String, nullable=True)
    # Free-form; not parsed as a calendar date.
    date: Mapped[str | None] = mapped_column(String, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
