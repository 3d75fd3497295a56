"""SQLAlchemy mixins for common model patterns.

Timestamps are stored as SQLite text (CURRENT_TIMESTAMP, UTC,
'YYYY-MM-DD HH:MM:SS') and assigned by the server at insert.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func


class CreatedAtMixin:
    """Mixin for a server-assigned created_at column (text)."""

    @declared_attr
    def created_at(cls) -> Mapped[str]:
        return mapped_column(
            String, server_default=func.current_timestamp(), nullable=False
        )
