"""Immutable parsing configuration."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

ParseIntHook = Callable[[str], Any] | None
ParseFloatHook = Callable[[str], Any] | None
ObjectHook = Callable[[dict[str, Any]], Any] | None
ObjectPairsHook = Callable[[list[tuple[str, Any]]], Any] | None


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    ``buffer_size`` bounds the characters read from a reader at a time;
    ``None`` picks the default (and parses a ``str`` as a single buffer).
    The hooks only apply when building plain Python objects.
    """

    buffer_size: int | None = None
    parse_int: ParseIntHook = None
    parse_float: ParseFloatHook = None
    object_hook: ObjectHook = None
    object_pairs_hook: ObjectPairsHook = None

    def __post_init__(self) -> None:
        if self.buffer_size is not None:
            if not isinstance(self.buffer_size, int) or isinstance(
                self.buffer_size, bool
            ):
                raise TypeError("buffer_size must be an integer or None")
            if self.buffer_size < 1:
                raise ValueError(
                    f"buffer_size must be >= 1, got {self.buffer_size}"
                )
        for name in ("parse_int", "parse_float", "object_hook", "object_pairs_hook"):
            hook = getattr(self, name)
            if hook is not None and not callable(hook):
                raise TypeError(f"{name} must be callable")
