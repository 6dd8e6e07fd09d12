"""Shared fixtures: isolated storage, recording notifier, calculator."""

from pathlib import Path

import pytest

from pagewidgets.calculator import CalculatorController, events_for_keys
from pagewidgets.storage import Storage


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch) -> Path:
    """Point the widget store at a temp dir for every test."""
    monkeypatch.delenv("PAGEWIDGETS_STORAGE", raising=False)
    monkeypatch.setenv("PAGEWIDGETS_HOME", str(tmp_path / "home"))
    return tmp_path / "home"


@pytest.fixture
def storage(tmp_path) -> Storage:
    return Storage(tmp_path / "store" / "storage.json")


@pytest.fixture
def notes() -> list:
    """Collects (message, severity) pairs; call it like a notifier."""

    class Recorder(list):
        def __call__(self, message, severity):
            self.append((message, severity))

    return Recorder()


@pytest.fixture
def renders() -> list:
    return []


@pytest.fixture
def calc(renders, notes) -> CalculatorController:
    return CalculatorController(render=renders.append, notify=notes)


@pytest.fixture
def press(calc):
    """Feed a key string through the calc fixture, return the display."""

    def _press(keys: str) -> str:
        display = calc.display
        for _, event in events_for_keys(keys):
            display = calc.dispatch(event)
        return display

    return _press
