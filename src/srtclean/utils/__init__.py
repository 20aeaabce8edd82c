"""Utility modules."""

from srtclean.utils.config import Settings, get_settings, load_denylist
from srtclean.utils.fileio import SRTFileError, read_whole_file, write_whole_file
from srtclean.utils.logging import setup_logging

__all__ = [
    "SRTFileError",
    "Settings",
    "get_settings",
    "load_denylist",
    "read_whole_file",
    "setup_logging",
    "write_whole_file",
]
