"""Shift direction for subtitle timestamps."""

from enum import StrEnum


class Direction(StrEnum):
    """Direction in which a timestamp is moved."""

    FORWARD = "forward"
    BACKWARD = "backward"

    @classmethod
    def default(cls) -> "Direction":
        """Return the default direction (forward)."""
        return cls.FORWARD

    @property
    def sign(self) -> int:
        """Return +1 for forward shifts and -1 for backward shifts."""
        return 1 if self is Direction.FORWARD else -1
