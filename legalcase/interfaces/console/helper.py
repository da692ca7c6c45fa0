"""
Console input/output helpers.

Output is rendered with rich. Input is read line by line from ``stream``
when one is given (scripted sessions and tests), otherwise from the
terminal. Running out of input raises ``EOFError``.
"""

from datetime import date, datetime, time
from typing import Any, Iterable, Mapping, Optional, Sequence, TextIO, TypeVar

from rich.console import Console
from rich.markup import escape
from rich.table import Table

E = TypeVar("E")

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
DISPLAY_DATETIME_FORMAT = "%d.%m.%Y %H:%M"
LINE_WIDTH = 50


def format_datetime(value: Optional[datetime]) -> str:
    return value.strftime(DISPLAY_DATETIME_FORMAT) if value else "-"


class ConsoleIO:
    def __init__(self, console: Optional[Console] = None, stream: Optional[TextIO] = None):
        self.console = console or Console()
        self.stream = stream

    # Output

    def clear(self) -> None:
        if self.stream is None and self.console.is_terminal:
            self.console.clear()

    def header(self, title: str) -> None:
        self.console.rule(f"[bold]{title.upper()}[/bold]", characters="=")

    def option(self, number: int, description: str) -> None:
        self.console.print(f"[cyan]{number}.[/cyan] {escape(description)}", highlight=False)

    def line(self) -> None:
        self.console.print("-" * LINE_WIDTH, highlight=False)

    def message(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False)

    def info(self, text: str) -> None:
        self.console.print(f"[blue]INFO:[/blue] {escape(text)}", highlight=False)

    def success(self, text: str) -> None:
        self.console.print(f"[green]SUCCESS:[/green] {escape(text)}", highlight=False)

    def warning(self, text: str) -> None:
        self.console.print(f"[yellow]WARNING:[/yellow] {escape(text)}", highlight=False)

    def error(self, text: str) -> None:
        self.console.print(f"[red]ERROR:[/red] {escape(text)}", highlight=False)

    def table(self, columns: Sequence[str], rows: Iterable[Sequence[Any]], title: Optional[str] = None) -> None:
        table = Table(title=title, show_lines=False)
        for column in columns:
            table.add_column(column)
        for row in rows:
            table.add_row(*("" if cell is None else escape(str(cell)) for cell in row))
        self.console.print(table)

    def details(self, fields: Sequence[tuple]) -> None:
        self.line()
        for name, value in fields:
            self.message(f"{name}: {'' if value is None else value}")
        self.line()

    # Input

    def _read_line(self, prompt: str, password: bool = False) -> str:
        if self.stream is not None:
            self.console.print(prompt, end="", markup=False, highlight=False)
            raw = self.stream.readline()
            if raw == "":
                raise EOFError("input exhausted")
            return raw.strip()
        return self.console.input(prompt, markup=False, password=password).strip()

    def read_string(self, prompt: str) -> str:
        return self._read_line(f"{prompt}: ")

    def read_optional(self, prompt: str) -> Optional[str]:
        """A string, or None when the answer is left blank."""
        return self.read_string(prompt) or None

    def read_required(self, prompt: str, password: bool = False) -> str:
        while True:
            value = self._read_line(f"{prompt}: ", password=password)
            if value:
                return value
            self.error("Input cannot be empty")

    def read_int(self, prompt: str, minimum: Optional[int] = None, maximum: Optional[int] = None) -> int:
        while True:
            raw = self._read_line(f"{prompt}: ")
            try:
                value = int(raw)
            except ValueError:
                self.error("Invalid number. Please try again")
                continue
            if minimum is not None and value < minimum or maximum is not None and value > maximum:
                if maximum is None:
                    self.error(f"Please enter a number of at least {minimum}")
                else:
                    self.error(f"Please enter a number between {minimum} and {maximum}")
                continue
            return value

    def read_date(self, prompt: str) -> date:
        while True:
            raw = self._read_line(f"{prompt} (yyyy-MM-dd): ")
            try:
                return datetime.strptime(raw, DATE_FORMAT).date()
            except ValueError:
                self.error("Invalid date format. Please use yyyy-MM-dd format")

    def read_time(self, prompt: str) -> time:
        while True:
            raw = self._read_line(f"{prompt} (HH:mm): ")
            try:
                return datetime.strptime(raw, TIME_FORMAT).time()
            except ValueError:
                self.error("Invalid time format. Please use HH:mm format")

    def read_datetime(self, prompt: str) -> datetime:
        self.message(prompt)
        return datetime.combine(self.read_date("Enter date"), self.read_time("Enter time"))

    def confirm(self, prompt: str) -> bool:
        while True:
            raw = self._read_line(f"{prompt} (y/n): ").lower()
            if raw in ("y", "yes"):
                return True
            if raw in ("n", "no"):
                return False
            self.error("Please enter 'y' or 'n'")

    def choose(self, prompt: str, labels: Mapping[E, str]) -> E:
        """Offer the labelled variants as a numbered list and return the pick."""
        variants = list(labels)
        self.message(prompt)
        for number, variant in enumerate(variants, start=1):
            self.option(number, labels[variant])
        return variants[self.read_int("Enter your choice", 1, len(variants)) - 1]

    def pause(self) -> None:
        self._read_line("Press Enter to continue...")
