"""SRT timestamp value type."""

import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Self

from srtclean.core.direction import Direction
from srtclean.core.errors import SubtitleError

MILLIS_PER_SECOND = 1000
MILLIS_PER_MINUTE = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR = 60 * MILLIS_PER_MINUTE

# Largest shift accepted, in milliseconds (signed 64-bit range)
MAX_SHIFT_MILLIS = 2**63 - 1

_DIGITS = re.compile(r"[0-9]+")


class TimestampFormatError(SubtitleError):
    """Exception raised when a timestamp string is malformed."""


class ShiftOverflowError(OverflowError):
    """Exception raised when a shift duration exceeds the representable range."""


def _parse_component(value: str, name: str) -> int:
    if not _DIGITS.fullmatch(value):
        raise TimestampFormatError(f"Invalid {name} '{value}', must be a number")
    return int(value)


@dataclass(order=True)
class Timestamp:
    """Time of day in ``HH:MM:SS,mmm`` form.

    Components are not range checked: ``00:75:00,000`` is a valid timestamp
    and equals ``01:15:00,000`` only in milliseconds, not component-wise.
    Ordering compares (hours, minutes, seconds, milliseconds) in turn.
    """

    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    @classmethod
    def parse(cls, value: str) -> Self:
        """Parse a ``HH:MM:SS,mmm`` string.

        Args:
            value: Timestamp string

        Returns:
            Parsed Timestamp

        Raises:
            TimestampFormatError: If the string has the wrong number of
                segments or a component is not a non-negative integer
        """
        parts = value.split(":")
        if len(parts) != 3:
            raise TimestampFormatError(
                f"Invalid timestamp format '{value}', expected 'HH:MM:SS,mmm'"
            )

        seconds_parts = parts[2].split(",")
        if len(seconds_parts) != 2:
            raise TimestampFormatError(
                f"Invalid seconds format '{parts[2]}', expected 'SS,mmm'"
            )

        return cls(
            hours=_parse_component(parts[0], "hours"),
            minutes=_parse_component(parts[1], "minutes"),
            seconds=_parse_component(seconds_parts[0], "seconds"),
            milliseconds=_parse_component(seconds_parts[1], "milliseconds"),
        )

    @classmethod
    def from_millis(cls, millis: int) -> Self:
        """Build a timestamp from a non-negative millisecond count."""
        if millis < 0:
            raise ValueError(f"Milliseconds must be non-negative, got {millis}")
        total_seconds, milliseconds = divmod(millis, MILLIS_PER_SECOND)
        total_minutes, seconds = divmod(total_seconds, 60)
        hours, minutes = divmod(total_minutes, 60)
        return cls(
            hours=hours, minutes=minutes, seconds=seconds, milliseconds=milliseconds
        )

    @classmethod
    def from_timedelta(cls, value: timedelta) -> Self:
        """Build a timestamp from a timedelta, truncating to milliseconds."""
        return cls.from_millis(value // timedelta(milliseconds=1))

    def to_millis(self) -> int:
        """Return the total number of milliseconds."""
        return (
            self.hours * MILLIS_PER_HOUR
            + self.minutes * MILLIS_PER_MINUTE
            + self.seconds * MILLIS_PER_SECOND
            + self.milliseconds
        )

    def to_timedelta(self) -> timedelta:
        """Return the timestamp as a timedelta."""
        return timedelta(milliseconds=self.to_millis())

    def format(self) -> str:
        """Render as ``HH:MM:SS,mmm``, widening fields that need more digits."""
        return (
            f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d},"
            f"{self.milliseconds:03d}"
        )

    def __str__(self) -> str:
        return self.format()

    def shift(
        self,
        delta: timedelta | int,
        direction: Direction = Direction.FORWARD,
    ) -> None:
        """Move the timestamp in place, clamping at zero.

        Args:
            delta: Non-negative shift, as a timedelta or in milliseconds
            direction: Forward adds the delta, backward subtracts it

        Raises:
            ValueError: If delta is negative
            ShiftOverflowError: If delta exceeds the signed 64-bit
                millisecond range
        """
        if isinstance(delta, timedelta):
            delta_millis = delta // timedelta(milliseconds=1)
        else:
            delta_millis = delta

        if delta_millis < 0:
            raise ValueError(f"Shift duration must be non-negative, got {delta}")
        if delta_millis > MAX_SHIFT_MILLIS:
            raise ShiftOverflowError(
                f"Shift duration of {delta_millis}ms is too large, "
                f"maximum is {MAX_SHIFT_MILLIS}ms"
            )

        shifted = max(self.to_millis() + direction.sign * delta_millis, 0)
        moved = Timestamp.from_millis(shifted)
        self.hours = moved.hours
        self.minutes = moved.minutes
        self.seconds = moved.seconds
        self.milliseconds = moved.milliseconds
