"""Subtitle format handlers."""

from srtclean.formats.srt import SRTDocument, parse_srt, serialize_srt

__all__ = [
    "SRTDocument",
    "parse_srt",
    "serialize_srt",
]
