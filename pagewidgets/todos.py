"""Persisted to-do list.

Items live as a JSON list under the "todos" key, in insertion order.
A list that loads empty is seeded with the sample tasks.
"""

from __future__ import annotations

import time
from typing import Optional

from pagewidgets.models import Severity, TodoItem
from pagewidgets.notify import Notifier
from pagewidgets.storage import Storage

STORAGE_KEY = "todos"

SAMPLE_TASKS = (
    "Review HTML semantics",
    "Practice CSS Grid layouts",
    "Build Bootstrap components",
    "Write JavaScript functions",
    "Test responsive design",
)


class TodoList:
    """Ordered CRUD over TodoItems with write-through persistence."""

    def __init__(self, storage: Storage, notify: Notifier) -> None:
        self.storage = storage
        self.notify = notify
        self._last_id = 0
        self._todos = self._load()
        if not self._todos:
            self._add_samples()

    def _load(self) -> list[TodoItem]:
        raw = self.storage.load(STORAGE_KEY)
        if not isinstance(raw, list):
            return []
        todos = [TodoItem.from_dict(d) for d in raw if isinstance(d, dict)]
        self._last_id = max((t.id for t in todos if t.id is not None), default=0)

        # Items stored without an id get one, persisted so it stays stable
        missing = [t for t in todos if t.id is None]
        for todo in missing:
            todo.id = self._next_id()
        if missing:
            self.storage.save(STORAGE_KEY, [t.to_dict() for t in todos])
        return todos

    def _next_id(self) -> int:
        """Millisecond timestamp, bumped past the last id when they collide."""
        self._last_id = max(time.time_ns() // 1_000_000, self._last_id + 1)
        return self._last_id

    def _add_samples(self) -> None:
        for text in SAMPLE_TASKS:
            self._todos.append(TodoItem(id=self._next_id(), text=text))
        self.save()

    def save(self) -> bool:
        return self.storage.save(STORAGE_KEY, [t.to_dict() for t in self._todos])

    @property
    def items(self) -> list[TodoItem]:
        return list(self._todos)

    def get(self, todo_id: int) -> Optional[TodoItem]:
        for todo in self._todos:
            if todo.id == todo_id:
                return todo
        return None

    def add(self, text: str) -> Optional[TodoItem]:
        """Append a task. Blank text is refused with an error notification."""
        text = text.strip()
        if not text:
            self.notify("Please enter a task", Severity.ERROR)
            return None

        todo = TodoItem(id=self._next_id(), text=text)
        self._todos.append(todo)
        self.save()
        self.notify("Task added!", Severity.SUCCESS)
        return todo

    def toggle(self, todo_id: int) -> Optional[TodoItem]:
        """Flip completion of one item. Unknown ids are ignored."""
        todo = self.get(todo_id)
        if todo:
            todo.completed = not todo.completed
            self.save()
        return todo

    def remove(self, todo_id: int) -> bool:
        """Delete one item. Returns whether anything was removed."""
        before = len(self._todos)
        self._todos = [t for t in self._todos if t.id != todo_id]
        self.save()
        return len(self._todos) < before
