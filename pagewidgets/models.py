"""Data models for the pagewidgets widgets.

Severity, ContrastMode, TodoItem, FieldSpec and FieldResult: the typed
structures that flow between the widgets, the store and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class Severity(str, Enum):
    """Notification severities."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class ContrastMode(str, Enum):
    """Page contrast modes."""

    NORMAL = "normal"
    HIGH = "high"


def _utc_now_iso() -> str:
    """Current UTC time as ISO8601 with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


@dataclass
class TodoItem:
    """A single to-do entry."""

    id: int
    text: str
    completed: bool = False
    created_at: str = field(default_factory=_utc_now_iso)

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, d: dict) -> TodoItem:
        """Deserialize from a stored dict; id is None when it was never stored."""
        return cls(
            id=d.get("id"),
            text=d.get("text", ""),
            completed=bool(d.get("completed", False)),
            created_at=d.get("createdAt", ""),
        )


@dataclass
class FieldSpec:
    """One form field and the checks it carries.

    kind is "text", "email" or "url"; min_length applies only to
    non-empty values.
    """

    name: str
    value: str = ""
    required: bool = False
    kind: str = "text"
    min_length: Optional[int] = None


@dataclass
class FieldResult:
    """Outcome of validating a single field."""

    name: str
    valid: bool = True
    message: str = ""
