"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from srtclean.core.subtitle import DEFAULT_DENYLIST
from srtclean.utils.fileio import read_whole_file


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Attributes:
        denylist: Phrases that mark subtitle text as unwanted
        denylist_file: Optional file with extra phrases, one per line
        encoding: Text encoding used for reading and writing SRT files
        log_level: Minimum level of emitted log events
        log_json: Emit JSON log lines instead of the console format
    """

    denylist: list[str] = list(DEFAULT_DENYLIST)
    denylist_file: Path | None = None

    encoding: str = "utf-8"

    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="SRTCLEAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings instance loaded from environment

    Note:
        Settings are cached for performance. Use get_settings.cache_clear()
        to reload settings in tests.
    """
    return Settings()


def load_denylist(settings: Settings | None = None) -> tuple[str, ...]:
    """Collect the configured denylist phrases.

    Args:
        settings: Settings to read from, defaults to get_settings()

    Returns:
        Configured phrases followed by the non-blank lines of denylist_file

    Raises:
        SRTFileError: If denylist_file is set but cannot be read
    """
    settings = settings or get_settings()
    phrases = [phrase for phrase in settings.denylist if phrase]

    if settings.denylist_file is not None:
        content = read_whole_file(settings.denylist_file, encoding=settings.encoding)
        for line in content.splitlines():
            phrase = line.strip()
            if phrase and phrase not in phrases:
                phrases.append(phrase)

    return tuple(phrases)
