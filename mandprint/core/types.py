"""Shared types for mandprint: Hue, Command, Report."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Hue:
    """A colour from the user's list, with its display number.

    `color` holds normalised components (r, g, b[, a]) as the colour picker
    supplies them; it may be None when the picker could not provide any.
    `num` is only used to label diagnostics.
    """

    num: int
    color: Sequence[float] | None
    label: str = ''  # original command-line text, for reports

    @property
    def key(self) -> str:
        """Report entry name, e.g. "color 3 (#004924)"."""
        return f'color {self.num} ({self.label})' if self.label else f'color {self.num}'


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='nearest', help='Closest printable colours')

        @command.run
        def run(hues, report, args):
            ...
    """

    def __init__(self, name: str, help: str = '', takes_colors: bool = True):
        self.name = name
        self.help = help
        self.takes_colors = takes_colors
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, hues: list[Hue], report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(hues, report, args)


@dataclass
class Report:
    """Accumulates results from a command for text/JSON output."""

    command: str = ''
    entries: dict[str, dict[str, Any]] = field(default_factory=dict)
    printable_count: int = 0
    unprintable_count: int = 0

    def add(self, key: str, section: str, data: dict[str, Any]) -> None:
        """Add results under an entry (a colour label, or a listing name)."""
        if key not in self.entries:
            self.entries[key] = {}
        self.entries[key][section] = data

    def record_printable(self, key: str) -> None:
        self.printable_count += 1

    def record_unprintable(self, key: str) -> None:
        self.unprintable_count += 1
