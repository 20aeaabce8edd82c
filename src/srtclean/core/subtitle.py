"""Subtitle domain model."""

import string
from collections.abc import Collection, Sequence
from dataclasses import dataclass
from datetime import timedelta
from typing import Self

from srtclean.core.direction import Direction
from srtclean.core.errors import SubtitleError
from srtclean.core.timestamp import Timestamp, TimestampFormatError

TIMING_MARKER = "-->"
TIMING_SEPARATOR = " --> "

# Text containing any of these phrases is dropped (case-sensitive substring match)
DEFAULT_DENYLIST: tuple[str, ...] = (
    "شتركوا في القناة",
    "لا تنسوا الاشتراك في القناة",
    "لا تنسوا الاشتراك",
    "المترجم للقناة",
    "موسيقى",
    "patch",
)


class NoTimestampError(SubtitleError):
    """Exception raised when a block has no timing line."""


class NoTextError(SubtitleError):
    """Exception raised when the timing line is not followed by a text line."""


class InvalidSubtitleError(SubtitleError):
    """Exception raised when subtitle text fails validation."""


def is_punctuation_only(text: str) -> bool:
    """Return True if every character of text is ASCII punctuation."""
    return all(char in string.punctuation for char in text)


@dataclass
class Subtitle:
    """Single validated subtitle entry with timing and one line of text."""

    start: Timestamp
    end: Timestamp
    text: str

    @classmethod
    def from_lines(
        cls,
        lines: Sequence[str],
        denylist: Collection[str] = DEFAULT_DENYLIST,
    ) -> Self:
        """Build a subtitle from the raw lines of one block.

        Lines before the timing line (such as the index) are ignored, and so
        is everything after the first text line.

        Args:
            lines: Lines of a subtitle block
            denylist: Phrases that make the text invalid

        Returns:
            Validated Subtitle

        Raises:
            NoTimestampError: If no line contains '-->'
            NoTextError: If the timing line is the last line
            TimestampFormatError: If either side of the timing line is malformed
            InvalidSubtitleError: If the text fails validation
        """
        timing_index = next(
            (i for i, line in enumerate(lines) if TIMING_MARKER in line), None
        )
        if timing_index is None:
            raise NoTimestampError("No timestamp found")
        if timing_index + 1 >= len(lines):
            raise NoTextError("No text provided")

        timing_line = lines[timing_index]
        parts = timing_line.split(TIMING_SEPARATOR)
        if len(parts) < 2:
            raise TimestampFormatError(
                f"Invalid timing line '{timing_line}', "
                "expected 'HH:MM:SS,mmm --> HH:MM:SS,mmm'"
            )

        subtitle = cls(
            start=Timestamp.parse(parts[0]),
            end=Timestamp.parse(parts[1]),
            text=lines[timing_index + 1].strip(),
        )

        if not subtitle.is_valid(denylist):
            raise InvalidSubtitleError(f"Invalid subtitle text '{subtitle.text}'")

        return subtitle

    def is_valid(self, denylist: Collection[str] = DEFAULT_DENYLIST) -> bool:
        """Check the text is non-empty, not denylisted and not just punctuation."""
        return (
            bool(self.text)
            and not any(phrase in self.text for phrase in denylist)
            and not is_punctuation_only(self.text)
        )

    def duration(self) -> timedelta:
        """Return how long the subtitle is shown, zero if it ends before it starts."""
        millis = self.end.to_millis() - self.start.to_millis()
        return timedelta(milliseconds=max(millis, 0))

    def move_start(
        self,
        delta: timedelta | int,
        direction: Direction = Direction.FORWARD,
    ) -> None:
        """Shift the start time only; the end time is left untouched."""
        self.start.shift(delta, direction)

    def render(self) -> str:
        """Render the timing and text lines, without the index."""
        return f"{self.start}{TIMING_SEPARATOR}{self.end}\n{self.text}\n"
