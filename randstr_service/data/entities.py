"""Domain entities for generated strings."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

from ..common.constants import DATE_DISPLAY_FORMAT

__all__ = ["RandomStringData", "parse_created"]


def parse_created(created: str) -> datetime:
    """Parse an ISO-8601 timestamp; a trailing ``Z`` and naive values mean UTC."""

    text = created.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class RandomStringData:
    """One generation result. ``id`` stays ``None`` until storage assigns it."""

    value: str
    length: int
    created: str
    id: Optional[int] = None

    def with_id(self, new_id: int) -> "RandomStringData":
        return replace(self, id=new_id)

    def formatted_date(self, tz: Optional[timezone] = None) -> str:
        """Render ``created`` for display in the local (or given) time zone."""

        return parse_created(self.created).astimezone(tz).strftime(DATE_DISPLAY_FORMAT)
