"""Data models for the link store."""

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any, Dict, Optional


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass
class Link:
    """A short code bound to its destination URL plus click metadata."""

    short_code: str
    original_url: str
    created_at: datetime
    clicks: int = 0
    last_clicked: Optional[datetime] = None

    def copy(self) -> "Link":
        """Return a detached copy of this record."""
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "short_code": self.short_code,
            "original_url": self.original_url,
            "clicks": self.clicks,
            "last_clicked": self.last_clicked.isoformat() if self.last_clicked else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Link":
        """Create from dictionary or database row.

        Accepts ISO-8601 strings or datetimes; naive datetimes are taken as UTC.
        """
        created_at = data["created_at"]
        if not isinstance(created_at, datetime):
            created_at = datetime.fromisoformat(created_at)

        last_clicked = data.get("last_clicked")
        if last_clicked is not None and not isinstance(last_clicked, datetime):
            last_clicked = datetime.fromisoformat(last_clicked)

        return cls(
            short_code=data["short_code"],
            original_url=data["original_url"],
            created_at=_as_utc(created_at),
            clicks=data.get("clicks") or 0,
            last_clicked=_as_utc(last_clicked),
        )
