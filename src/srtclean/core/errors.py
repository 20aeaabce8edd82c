"""Subtitle error hierarchy."""


class SubtitleError(ValueError):
    """Base error for a subtitle block that cannot be turned into an entry."""
