"""Parse error raised on the first grammar violation."""

from __future__ import annotations

from ._location import Location

UNEXPECTED_END_OF_INPUT = "Unexpected end of input"
UNEXPECTED_CHARACTER = "Unexpected character"
NESTING_TOO_DEEP = "Nesting too deep"


class JsonParseError(ValueError):
    """
    Reports malformed JSON together with the location of the offending
    character.

    ``message`` holds the bare description; ``str()`` appends the location
    as ``"<message> at <line>:<column>"``.
    """

    def __init__(self, message: str, location: Location) -> None:
        if not isinstance(message, str):
            raise TypeError("message must be a string")
        if not isinstance(location, Location):
            raise TypeError("location must be a Location")

        self.message = message
        self.location = location
        super().__init__(f"{message} at {location}")

    def __reduce__(self) -> tuple[type[JsonParseError], tuple[str, Location]]:
        return (type(self), (self.message, self.location))

    @property
    def offset(self) -> int:
        return self.location.offset

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column
