"""Console notifications.

A notifier is any callable notify(message, severity). ConsoleNotifier is
the one the CLI uses; widgets accept any callable so tests can record.
"""

from __future__ import annotations

from typing import Callable

from rich.console import Console

from pagewidgets.models import Severity

Notifier = Callable[[str, Severity], None]

_SEVERITY_STYLES = {
    Severity.SUCCESS: "green",
    Severity.ERROR: "red",
    Severity.INFO: "blue",
}


class ConsoleNotifier:
    """Prints notifications on a Rich console, coloured by severity."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def __call__(self, message: str, severity: Severity = Severity.INFO) -> None:
        style = _SEVERITY_STYLES.get(Severity(severity), "blue")
        self.console.print(f"[{style}]{message}[/{style}]")
