"""SRT document parser and serializer."""

from collections.abc import Collection, Iterator
from datetime import timedelta
from pathlib import Path

import structlog

from srtclean.core.direction import Direction
from srtclean.core.errors import SubtitleError
from srtclean.core.subtitle import DEFAULT_DENYLIST, Subtitle
from srtclean.utils.fileio import read_whole_file, write_whole_file

logger = structlog.get_logger()


class SRTDocument:
    """Ordered collection of valid subtitle entries backed by an SRT file.

    Entries keep file order and are never sorted or deduplicated. Indices in
    the source are ignored; serialize() always numbers entries from 1.
    """

    def __init__(
        self,
        path: Path | str | None = None,
        *,
        denylist: Collection[str] = DEFAULT_DENYLIST,
        encoding: str = "utf-8",
    ) -> None:
        self.path = Path(path) if path is not None else None
        self.denylist = denylist
        self.encoding = encoding
        self.entries: list[Subtitle] = []
        self.skipped = 0

    def __len__(self) -> int:
        """Return number of entries."""
        return len(self.entries)

    def __iter__(self) -> Iterator[Subtitle]:
        """Iterate over entries."""
        return iter(self.entries)

    def __getitem__(self, index: int) -> Subtitle:
        """Get entry by position (0-based)."""
        return self.entries[index]

    def parse(self, content: str) -> int:
        """Parse SRT content and append every valid entry.

        Lines are collected into a buffer until they form a valid subtitle.
        A blank line discards whatever is buffered, so malformed or rejected
        blocks are skipped instead of aborting the parse.

        Args:
            content: SRT format string content

        Returns:
            Number of entries added
        """
        added = 0
        buffer: list[str] = []

        for line in content.split("\n"):
            line = line.strip()
            if not line:
                if buffer:
                    self._skip(buffer)
                    buffer = []
                continue

            buffer.append(line)
            if len(buffer) < 2:
                continue

            try:
                subtitle = Subtitle.from_lines(buffer, self.denylist)
            except SubtitleError as e:
                logger.debug("block_incomplete", lines=len(buffer), reason=str(e))
                continue

            self.entries.append(subtitle)
            added += 1
            buffer = []

        if buffer:
            self._skip(buffer)

        logger.debug(
            "srt_parsed",
            path=str(self.path) if self.path else None,
            entries=added,
            skipped=self.skipped,
        )
        return added

    def _skip(self, buffer: list[str]) -> None:
        self.skipped += 1
        logger.debug("block_skipped", lines=buffer)

    def serialize(self) -> str:
        """Serialize entries to SRT text with fresh 1-based indices.

        Each entry is its index line, timing line and text line followed by a
        blank line.
        """
        return "".join(
            f"{i}\n{entry.render()}\n"
            for i, entry in enumerate(self.entries, start=1)
        )

    def shift(
        self,
        delta: timedelta | int,
        direction: Direction = Direction.FORWARD,
    ) -> None:
        """Shift the start time of every entry.

        Raises:
            ValueError: If delta is negative
            ShiftOverflowError: If delta is too large to represent
        """
        for entry in self.entries:
            entry.move_start(delta, direction)
        logger.info(
            "subtitles_shifted",
            entries=len(self.entries),
            delta=str(delta),
            direction=str(direction),
        )

    def read(self) -> int:
        """Read and parse the bound file.

        Returns:
            Number of entries added

        Raises:
            ValueError: If the document has no path
            SRTFileError: If the file cannot be read
        """
        if self.path is None:
            raise ValueError("Document has no input path to read from")
        content = read_whole_file(self.path, encoding=self.encoding)
        logger.debug("srt_read", path=str(self.path), chars=len(content))
        return self.parse(content)

    def write(self, path: Path | str | None = None) -> Path:
        """Serialize the entries and write them to path (default: bound path).

        Returns:
            Path to the written file

        Raises:
            ValueError: If neither path nor a bound path is given
            SRTFileError: If the file cannot be written
        """
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("No output path given")
        written = write_whole_file(target, self.serialize(), encoding=self.encoding)
        logger.debug("srt_written", path=str(written), entries=len(self.entries))
        return written


def parse_srt(
    content: str,
    *,
    denylist: Collection[str] | None = None,
) -> SRTDocument:
    """Parse SRT format string into an SRTDocument.

    Args:
        content: SRT format string content
        denylist: Phrases that reject an entry, defaults to DEFAULT_DENYLIST

    Returns:
        SRTDocument containing the valid entries
    """
    document = SRTDocument(
        denylist=denylist if denylist is not None else DEFAULT_DENYLIST
    )
    document.parse(content)
    return document


def serialize_srt(document: SRTDocument) -> str:
    """Serialize an SRTDocument to SRT format string."""
    return document.serialize()
