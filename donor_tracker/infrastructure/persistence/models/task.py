"""Task ORM model. One invitation of a donor to an event, reviewed by the donor's PMM."""

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from donor_tracker.domain.enums import TaskStatus
from donor_tracker.infrastructure.persistence.database import Base
from donor_tracker.infrastructure.persistence.models.mixins import CreatedAtMixin

_STATUS_CHECK = "status IN ({})".format(
    ", ".join(f"'{value}'" for value in TaskStatus.values())
)


class Task(CreatedAtMixin, Base):
    """Invitation task. Table: tasks.

    One task per (event, donor) is the intended usage; the schema does
    not enforce it.
    """

    __tablename__ = "tasks"

    task_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    event_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("events.event_id"), nullable=False, index=True
    )
    donor_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("donors.donor_id"), nullable=False, index=True
    )
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=TaskStatus.PENDING.value,
        server_default=TaskStatus.PENDING.value,
    )
    reason: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint(_STATUS_CHECK, name="ck_tasks_status"),
        Index("ix_tasks_event_donor", "event_id", "donor_id"),
        {"sqlite_autoincrement": True},
    )
