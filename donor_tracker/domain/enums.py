"""Domain enumerations for the donor tracker.

Enums represent fixed sets of domain values (e.g. task status).
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Invitation task status.

    Tasks start as pending; a PMM moves them to approved or rejected.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings.

        Returns:
            List of enum value strings (e.g. for validation or the CHECK constraint).
        """
        return [status.value for status in cls]

    @classmethod
    def update_targets(cls) -> list["TaskStatus"]:
        """Statuses a caller may move a task into."""
        return [cls.APPROVED, cls.REJECTED]

    @property
    def is_terminal(self) -> bool:
        return self is not TaskStatus.PENDING
