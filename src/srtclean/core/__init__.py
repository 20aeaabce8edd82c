"""Core subtitle domain modules."""

from srtclean.core.direction import Direction
from srtclean.core.errors import SubtitleError
from srtclean.core.subtitle import (
    DEFAULT_DENYLIST,
    InvalidSubtitleError,
    NoTextError,
    NoTimestampError,
    Subtitle,
)
from srtclean.core.timestamp import (
    ShiftOverflowError,
    Timestamp,
    TimestampFormatError,
)

__all__ = [
    "DEFAULT_DENYLIST",
    "Direction",
    "InvalidSubtitleError",
    "NoTextError",
    "NoTimestampError",
    "ShiftOverflowError",
    "Subtitle",
    "SubtitleError",
    "Timestamp",
    "TimestampFormatError",
]
