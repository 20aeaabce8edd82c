"""Clean, renumber and re-time SubRip (SRT) subtitle files."""

__version__ = "0.1.0"
