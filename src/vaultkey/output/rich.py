"""Rich console helpers."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console()


def print_success(message: str) -> None:
    console.print(f"[bold green]OK[/bold green] {escape(message)}")


def print_warning(message: str) -> None:
    console.print(f"[bold yellow]WARN[/bold yellow] {escape(message)}")


def print_error(message: str) -> None:
    # messages may quote pydantic or requests errors containing brackets
    console.print(f"[bold red]ERROR[/bold red] {escape(message)}", soft_wrap=True)
