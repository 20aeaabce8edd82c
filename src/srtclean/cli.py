"""Command-line interface for cleaning SRT files."""

from pathlib import Path
from typing import Annotated

import structlog
import typer

from srtclean.core.direction import Direction
from srtclean.core.timestamp import ShiftOverflowError
from srtclean.formats.srt import SRTDocument
from srtclean.utils.config import get_settings, load_denylist
from srtclean.utils.fileio import SRTFileError
from srtclean.utils.logging import setup_logging

logger = structlog.get_logger()

app = typer.Typer(
    help="Clean, renumber and re-time SubRip (SRT) subtitle files",
    add_completion=False,
)


@app.command()
def clean(
    input_file: Annotated[Path, typer.Argument(help="Input SRT file")],
    output_file: Annotated[Path, typer.Argument(help="Output SRT file")],
    shift: Annotated[
        int, typer.Option("--shift", "-s", min=0, help="Shift start times by MS")
    ] = 0,
    direction: Annotated[
        Direction, typer.Option("--direction", "-d", help="Shift direction")
    ] = Direction.default(),
    denylist_file: Annotated[
        Path | None,
        typer.Option("--denylist-file", help="Extra denylist phrases, one per line"),
    ] = None,
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="Log level (default: INFO)")
    ] = None,
    json_logs: Annotated[
        bool, typer.Option("--json-logs", help="Emit JSON log lines")
    ] = False,
) -> None:
    """Drop invalid entries from INPUT_FILE and write the rest to OUTPUT_FILE."""
    settings = get_settings()
    if denylist_file is not None:
        settings = settings.model_copy(update={"denylist_file": denylist_file})

    try:
        setup_logging(
            log_level or settings.log_level,
            json_logs=json_logs or settings.log_json,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e

    log = logger.bind(input=str(input_file), output=str(output_file))

    try:
        denylist = load_denylist(settings)
        document = SRTDocument(
            input_file, denylist=denylist, encoding=settings.encoding
        )
        document.read()
    except SRTFileError as e:
        log.error("srt_read_failed", error=str(e))
        raise typer.Exit(1) from e
    log.debug("srt_read_succeeded", entries=len(document), skipped=document.skipped)

    if shift:
        try:
            document.shift(shift, direction)
        except ShiftOverflowError as e:
            log.error("shift_failed", error=str(e))
            raise typer.Exit(1) from e

    try:
        document.write(output_file)
    except SRTFileError as e:
        log.error("srt_write_failed", error=str(e))
        raise typer.Exit(1) from e
    log.info("srt_write_succeeded", entries=len(document))


def main() -> None:
    """Console script entry point."""
    app()
