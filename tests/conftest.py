"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

import pytest

from tests.helpers.fs import AlbumFixture, AudioStubSpec, build_album_dir

_ENV_VARS = (
    "MUSIC_IDS_PARSE_MODE",
    "MUSIC_IDS_OUTPUT_FORMAT",
    "MUSIC_IDS_TAG_READER_BACKEND",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep user config and MUSIC_IDS_* variables out of every test."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def album_dir_factory(tmp_path: Path) -> Callable[..., AlbumFixture]:
    """Build album directories of stub audio files under a temp library."""
    library = tmp_path / "library"

    def _factory(
        name: str,
        specs: list[AudioStubSpec],
        non_audio_files: list[str] | None = None,
    ) -> AlbumFixture:
        return build_album_dir(library, name, specs, non_audio_files)

    return _factory


@pytest.fixture
def settings_file(tmp_path: Path) -> Callable[..., Path]:
    """Write a settings JSON file and return its path."""

    def _write(**values: str) -> Path:
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(values))
        return path

    return _write
