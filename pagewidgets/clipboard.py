"""Copy code blocks to the system clipboard."""

from __future__ import annotations

import pyperclip

from pagewidgets.models import Severity
from pagewidgets.notify import Notifier


def copy_code(text: str, notify: Notifier) -> None:
    """Put text on the clipboard verbatim and confirm with a notification.

    Raises:
        pyperclip.PyperclipException: no clipboard mechanism is available.
    """
    pyperclip.copy(text)
    notify("Copied!", Severity.SUCCESS)
