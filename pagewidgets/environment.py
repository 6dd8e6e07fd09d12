"""Environment-driven configuration for pagewidgets.

Read at call time so tests and shells can override per invocation.
Self-contained, no external dependencies.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

# Explicit storage file; wins over PAGEWIDGETS_HOME
STORAGE_ENV = "PAGEWIDGETS_STORAGE"
HOME_ENV = "PAGEWIDGETS_HOME"
STORAGE_FILENAME = "storage.json"


def storage_path(env: Optional[dict[str, str]] = None) -> Path:
    """Resolve the JSON file backing the widget store.

    Args:
        env: Mapping to read instead of os.environ.
    """
    env = os.environ if env is None else env
    explicit = env.get(STORAGE_ENV)
    if explicit:
        return Path(explicit).expanduser()
    home = env.get(HOME_ENV)
    root = Path(home).expanduser() if home else Path.home() / ".pagewidgets"
    return root / STORAGE_FILENAME
