"""JSON-file key/value store shared by the persisted widgets.

Never raises on I/O: save() reports failure as False and load() as None.
A missing file is an empty store; a file that exists but is not a JSON
object is left untouched, so one bad write never costs the other keys.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Optional

from pagewidgets.environment import storage_path


class Storage:
    """Opaque key/value persistence over one JSON object file."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path or storage_path()

    def _read_all(self) -> Optional[dict[str, Any]]:
        """Every stored key, {} when there is no file, None when unreadable."""
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (json.JSONDecodeError, UnicodeDecodeError, OSError):
            return None
        return data if isinstance(data, dict) else None

    def load(self, key: str) -> Optional[Any]:
        """Return the value stored under key, or None."""
        return (self._read_all() or {}).get(key)

    def save(self, key: str, data: Any) -> bool:
        """Store data under key. Returns False if it could not be written.

        The file is replaced atomically via a temp file in the same
        directory; an unreadable existing file is never overwritten.
        """
        everything = self._read_all()
        if everything is None:
            return False
        everything[key] = data
        try:
            text = json.dumps(everything, indent=2)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._replace(text)
        except (TypeError, ValueError, OSError):
            return False
        return True

    def _replace(self, text: str) -> None:
        fd, tmp = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp, self.path)
        except OSError:
            Path(tmp).unlink(missing_ok=True)
            raise
