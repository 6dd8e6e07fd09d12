"""CLI for the pagewidgets widgets.

Usage:
    python -m pagewidgets calc "12.5*4="          # Feed keys, print display
    python -m pagewidgets calc "9/0=" --trace     # Show every key's display
    python -m pagewidgets calc                    # Interactive keypad
    python -m pagewidgets theme [--toggle]        # Show or flip contrast mode
    python -m pagewidgets todo list               # Show to-do items
    python -m pagewidgets todo add <text>         # Add an item
    python -m pagewidgets todo done <id>          # Toggle completion
    python -m pagewidgets todo rm <id>            # Remove an item
    python -m pagewidgets validate --name ... --email ...
    python -m pagewidgets copy snippet.py         # Copy a code block
    cat snippet.py | python -m pagewidgets copy   # ... or from stdin
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import pyperclip
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pagewidgets.calculator import CalculatorController, events_for_keys
from pagewidgets.clipboard import copy_code
from pagewidgets.forms import validate_form
from pagewidgets.models import FieldSpec
from pagewidgets.notify import ConsoleNotifier
from pagewidgets.storage import Storage
from pagewidgets.theme import ThemeManager
from pagewidgets.todos import TodoList

app = typer.Typer(
    name="pagewidgets",
    help="Calculator, contrast toggle, to-do list, form validator and code copy",
    no_args_is_help=True,
)
todo_app = typer.Typer(help="Manage the persisted to-do list", no_args_is_help=True)
app.add_typer(todo_app, name="todo")

console = Console(stderr=True)

_QUIT_WORDS = ("q", "quit", "exit")


def _feed(controller: CalculatorController, keys: str, trace: Optional[Table] = None) -> None:
    """Translate keys and dispatch them, or exit 1 on an unknown key."""
    try:
        pairs = events_for_keys(keys)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    for key, event in pairs:
        display = controller.dispatch(event)
        if trace is not None:
            trace.add_row(key, type(event).__name__, display)


def _interactive(controller: CalculatorController) -> None:
    """Read key lines until quit or EOF, printing the display after each."""
    console.print("[dim]Keys: 0-9 . + - * / = c (clear) < (delete). 'quit' to exit.[/dim]")
    while True:
        try:
            line = console.input("[bold]> [/bold]")
        except EOFError:
            break
        if line.strip().lower() in _QUIT_WORDS:
            break
        try:
            pairs = events_for_keys(line)
        except ValueError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            continue
        for _, event in pairs:
            controller.dispatch(event)
        console.print(f"  [bold]{controller.display}[/bold]")


@app.command("calc")
def cmd_calc(
    keys: Optional[str] = typer.Argument(None, help="Keys to press, e.g. '5+3='"),
    trace: bool = typer.Option(False, "--trace", "-t", help="Show the display after every key"),
) -> None:
    """Drive the calculator from a key string or an interactive prompt."""
    controller = CalculatorController(notify=ConsoleNotifier(console))

    if keys is None:
        _interactive(controller)
        return

    table = None
    if trace:
        table = Table(title="Calculator trace", show_header=True, header_style="bold")
        table.add_column("Key", style="cyan", justify="center")
        table.add_column("Event", style="dim")
        table.add_column("Display", justify="right")

    _feed(controller, keys, table)

    if table is not None:
        console.print()
        console.print(table)
    console.print(f"[bold]{controller.display}[/bold]")


@app.command("theme")
def cmd_theme(
    toggle: bool = typer.Option(False, "--toggle", help="Flip between normal and high contrast"),
) -> None:
    """Show or flip the persisted contrast mode."""
    theme = ThemeManager(Storage())
    if toggle:
        theme.toggle()
    style = "yellow" if theme.pressed else "green"
    console.print(f"Contrast: [{style}]{theme.mode.value}[/{style}]")


def _todo_list() -> TodoList:
    return TodoList(Storage(), ConsoleNotifier(console))


def _render_todos(todos: TodoList) -> None:
    table = Table(title="To-do", show_header=True, header_style="bold")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Task", min_width=20)
    table.add_column("Done", justify="center")
    for todo in todos.items:
        done = "[green]✓[/green]" if todo.completed else ""
        text = escape(todo.text)
        if todo.completed:
            text = f"[strike]{text}[/strike]"
        table.add_row(str(todo.id), text, done)
    console.print()
    console.print(table)
    console.print()


@todo_app.command("list")
def cmd_todo_list() -> None:
    """Show every to-do item."""
    _render_todos(_todo_list())


@todo_app.command("add")
def cmd_todo_add(text: str = typer.Argument(help="Task text")) -> None:
    """Add a task to the end of the list."""
    todos = _todo_list()
    if todos.add(text) is None:
        raise typer.Exit(1)


@todo_app.command("done")
def cmd_todo_done(todo_id: int = typer.Argument(help="Item id (see 'todo list')")) -> None:
    """Toggle an item between done and not done."""
    todo = _todo_list().toggle(todo_id)
    if todo is None:
        console.print(f"[red]Error:[/red] No task with id {todo_id}")
        raise typer.Exit(1)
    state = "done" if todo.completed else "not done"
    console.print(f"{escape(todo.text)}: [green]{state}[/green]")


@todo_app.command("rm")
def cmd_todo_rm(todo_id: int = typer.Argument(help="Item id (see 'todo list')")) -> None:
    """Remove an item."""
    if not _todo_list().remove(todo_id):
        console.print(f"[red]Error:[/red] No task with id {todo_id}")
        raise typer.Exit(1)
    console.print(f"Removed {todo_id}")


@app.command("validate")
def cmd_validate(
    name: str = typer.Option("", "--name", help="Contact name (required, 2+ chars)"),
    email: str = typer.Option("", "--email", help="Email address (required)"),
    website: str = typer.Option("", "--website", help="Website URL (optional)"),
    message: str = typer.Option("", "--message", help="Message (required, 10+ chars)"),
) -> None:
    """Validate a contact form and report each field."""
    fields = [
        FieldSpec("name", name, required=True, min_length=2),
        FieldSpec("email", email, required=True, kind="email"),
        FieldSpec("website", website, kind="url"),
        FieldSpec("message", message, required=True, min_length=10),
    ]

    table = Table(title="Contact form", show_header=True, header_style="bold")
    table.add_column("Field", style="dim")
    table.add_column("Result")
    results = validate_form(fields, ConsoleNotifier(console))
    for r in results:
        table.add_row(r.name, "[green]ok[/green]" if r.valid else f"[red]{r.message}[/red]")
    console.print(table)

    if not all(r.valid for r in results):
        raise typer.Exit(1)


@app.command("copy")
def cmd_copy(
    path: Optional[Path] = typer.Argument(None, help="File holding the code block (default: stdin)"),
) -> None:
    """Copy a code block to the clipboard."""
    try:
        if path is None:
            text = sys.stdin.read()
        else:
            text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error:[/red] Cannot read {escape(str(path or 'stdin'))}: {escape(str(e))}")
        raise typer.Exit(1)

    try:
        copy_code(text, ConsoleNotifier(console))
    except pyperclip.PyperclipException as e:
        console.print(f"[red]Error:[/red] Clipboard unavailable: {escape(str(e))}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
