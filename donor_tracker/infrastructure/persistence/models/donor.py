"""Donor ORM model."""

from sqlalchemy import Float, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from donor_tracker.infrastructure.persistence.database import Base
from donor_tracker.infrastructure.persistence.models.mixins import CreatedAtMixin


class Donor(CreatedAtMixin, Base):
    """Insert-only donor record. Table: donors.

    (first_name, last_name) is the de-duplication key used by
    find-or-create; it is indexed but not unique, so batch imports may
    still hold repeated names.
    """

    __tablename__ = "donors"

    donor_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    first_name: Mapped[str | None] = mapped_column(String, nullable=True)
    nick_name: Mapped[str | None] = mapped_column(String, nullable=True)
    last_name: Mapped[str | None] = mapped_column(String, nullable=True)
    pmm: Mapped[str] = mapped_column(String, nullable=False, index=True)
    organization_name: Mapped[str | None] = mapped_column(String, nullable=True)
    city: Mapped[str | None] = mapped_column(String, nullable=True)
    total_donations: Mapped[float | None] = mapped_column(Float, nullable=True)

    __table_args__ = (
        Index("ix_donors_name", "first_name", "last_name"),
        {"sqlite_autoincrement": True},
    )
