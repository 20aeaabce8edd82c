"""Pytest configuration and shared fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

from srtclean.utils.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the get_settings LRU cache before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore the default structlog configuration after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def no_env_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run test in a directory without .env file."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_srt_content() -> str:
    """Return sample SRT content for testing."""
    return """1
00:00:01,000 --> 00:00:04,000
Hello, this is a test.

2
00:00:05,000 --> 00:00:08,000
This is the second subtitle.

3
00:00:09,000 --> 00:00:12,000
And this is the third one.
"""


@pytest.fixture
def dirty_srt_content() -> str:
    """Return SRT content mixing valid entries with spam, noise and bad blocks."""
    return """5
00:00:01,000 --> 00:00:02,000
First line

6
00:00:02,500 --> 00:00:03,000
...

7
00:00:03,000 --> 00:00:04,000
لا تنسوا الاشتراك في القناة

8
00:00:xx,000 --> 00:00:05,000
Broken timing

12
00:00:06,000 --> 00:00:07,000
Second line
"""
