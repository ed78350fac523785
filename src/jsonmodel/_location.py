"""Position tracking for the character source."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Location:
    """
    Exact position of a character in the input.

    Attributes:
        offset: Number of characters consumed before this one (0-based)
        line: Line number (1-based)
        column: Column number (1-based)
    """

    offset: int
    line: int
    column: int

    START: ClassVar[Location]

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")
        if self.line < 1:
            raise ValueError(f"line must be >= 1, got {self.line}")
        if self.column < 1:
            raise ValueError(f"column must be >= 1, got {self.column}")

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


Location.START = Location(0, 1, 1)


class PositionTracker:
    """
    Running offset, line and column over a stream of consumed characters.

    A lone CR and a lone LF each end a line; CR followed by LF counts as a
    single terminator.
    """

    __slots__ = ("offset", "line", "column", "_after_cr")

    def __init__(self) -> None:
        self.offset = 0
        self.line = 1
        self.column = 1
        self._after_cr = False

    def advance(self, char: str) -> None:
        """Accounts for one consumed character."""
        self.offset += 1
        if char == "\n":
            if not self._after_cr:
                self.line += 1
                self.column = 1
            self._after_cr = False
        elif char == "\r":
            self.line += 1
            self.column = 1
            self._after_cr = True
        else:
            self.column += 1
            self._after_cr = False

    @property
    def location(self) -> Location:
        """Snapshot of the current position."""
        return Location(self.offset, self.line, self.column)
