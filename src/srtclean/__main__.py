"""Allow running the CLI with ``python -m srtclean``."""

from srtclean.cli import main

main()
