"""Pytest configuration and shared fixtures for integration tests."""

from pathlib import Path

import pytest


@pytest.fixture
def real_world_srt(tmp_path: Path) -> Path:
    """Write a messy, CRLF-terminated SRT file and return its path."""
    content = (
        "﻿1\r\n"
        "00:00:00,500 --> 00:00:02,000\r\n"
        "مرحبا بكم\r\n"
        "\r\n"
        "2\r\n"
        "00:00:02,500 --> 00:00:04,000\r\n"
        "اشتركوا في القناة\r\n"
        "\r\n"
        "\r\n"
        "3\r\n"
        "00:00:04,500 --> 00:00:06,000\r\n"
        "!!!\r\n"
        "\r\n"
        "4\r\n"
        "\r\n"
        "00:00:06,500 --> 00:00:08,000\r\n"
        "Second kept line\r\n"
        "with a continuation\r\n"
        "\r\n"
        "10\r\n"
        "00:00:08,500 --> 00:00:10,000\r\n"
        "ترجمة المترجم للقناة\r\n"
        "\r\n"
        "11\r\n"
        "00:01:10,000 --> 00:01:12,000\r\n"
        "Third kept line\r\n"
    )
    path = tmp_path / "episode.srt"
    path.write_bytes(content.encode("utf-8"))
    return path
