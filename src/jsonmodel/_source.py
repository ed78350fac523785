"""Buffered character source with single-character lookahead."""

from __future__ import annotations

import io
import logging
from typing import Protocol

from ._location import Location
from ._location import PositionTracker

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 1024


class TextReader(Protocol):
    def read(self, size: int = -1, /) -> str: ...


class CharSource:
    """
    Presents a text stream as a sequence of positioned characters.

    Characters are pulled from the reader into a fixed-size buffer that is
    refilled when drained. ``current`` is the lookahead character (``None``
    at end of input) and ``location`` is its position. Text between
    ``start_capture()`` and ``end_capture()`` is retained across refills.

    A plain ``str`` given without a buffer size is used as one buffer.
    """

    def __init__(
        self, source: str | TextReader, buffer_size: int | None = None
    ) -> None:
        if buffer_size is not None:
            if not isinstance(buffer_size, int) or isinstance(
                buffer_size, bool
            ):
                raise TypeError("buffer_size must be an integer")
            if buffer_size < 1:
                raise ValueError(
                    f"buffer_size must be >= 1, got {buffer_size}"
                )

        self._reader: TextReader | None
        if isinstance(source, str):
            if buffer_size is None:
                self._reader = None
                self._buffer = source
            else:
                self._reader = io.StringIO(source)
                self._buffer = ""
        elif hasattr(source, "read"):
            self._reader = source
            self._buffer = ""
        else:
            raise TypeError(
                "source must be str or have a read() method, "
                f"not {type(source).__name__}"
            )

        self.buffer_size = buffer_size or DEFAULT_BUFFER_SIZE
        self._fill = len(self._buffer)
        self._index = 0
        self._tracker = PositionTracker()
        self._capture: list[str] | None = None
        self._capture_start = -1
        self.current: str | None = None
        self._read()

    @property
    def location(self) -> Location:
        """Position of the lookahead character."""
        return self._tracker.location

    def is_end_of_input(self) -> bool:
        return self.current is None

    def next(self) -> None:
        """Consumes the lookahead character. No-op at end of input."""
        if self.current is None:
            return
        self._tracker.advance(self.current)
        self._read()

    def start_capture(self) -> None:
        """Begins retaining text, starting with the lookahead character."""
        self._capture = []
        self._capture_start = self._cursor()

    def end_capture(self) -> str:
        """Returns the text consumed since ``start_capture()``."""
        if self._capture_start < 0:
            raise RuntimeError("no capture in progress")
        tail = self._buffer[self._capture_start : self._cursor()]
        pieces = self._capture
        self._capture = None
        self._capture_start = -1
        if pieces:
            pieces.append(tail)
            return "".join(pieces)
        return tail

    def _cursor(self) -> int:
        """Buffer index of the lookahead character."""
        return self._index - 1 if self.current is not None else self._fill

    def _read(self) -> None:
        if self._index == self._fill:
            if not self._refill():
                self.current = None
                return
        self.current = self._buffer[self._index]
        self._index += 1

    def _refill(self) -> bool:
        if self._reader is None:
            return False
        if self._capture_start >= 0:
            assert self._capture is not None
            self._capture.append(self._buffer[self._capture_start : self._fill])
            self._capture_start = 0
        chunk = self._reader.read(self.buffer_size)
        if not isinstance(chunk, str):
            raise TypeError(
                f"reader must return str, not {type(chunk).__name__}"
            )
        self._buffer = chunk
        self._fill = len(chunk)
        self._index = 0
        logger.debug(
            "refilled %d chars at offset %d", self._fill, self._tracker.offset
        )
        return self._fill > 0
