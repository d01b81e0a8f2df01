"""Application settings for the music-ids command line."""

from __future__ import annotations

from dataclasses import dataclass
import json
import os
from pathlib import Path
from typing import Optional

from music_ids.core.identifier import OutputFormat


_DEFAULT_PARSE_MODE = "strict"
_ALLOWED_PARSE_MODES = {"strict", "relaxed"}
_DEFAULT_OUTPUT_FORMAT = OutputFormat.FULL.value
_ALLOWED_OUTPUT_FORMATS = {item.value for item in OutputFormat}
_DEFAULT_BACKEND = "mutagen"
_ALLOWED_BACKENDS = {"mutagen", "meta-json"}


@dataclass(frozen=True)
class Settings:
    parse_mode: str = _DEFAULT_PARSE_MODE
    output_format: str = _DEFAULT_OUTPUT_FORMAT
    tag_reader_backend: str = _DEFAULT_BACKEND

    @property
    def relaxed(self) -> bool:
        return self.parse_mode == "relaxed"


def load_settings(path: Optional[Path]) -> Settings:
    """Load settings from JSON config file, with environment variable overrides.

    Priority order:
    1. Environment variables
    2. JSON config file
    3. Defaults

    Args:
        path: Path to JSON config file, or None to use defaults only

    Returns:
        Settings object with resolved values
    """
    json_settings = {}
    if path and path.exists():
        json_settings = json.loads(path.read_text())

    parse_mode = _resolve(
        "MUSIC_IDS_PARSE_MODE", json_settings.get("parse_mode"), _DEFAULT_PARSE_MODE
    )
    if parse_mode not in _ALLOWED_PARSE_MODES:
        raise ValueError(f"Unsupported parse mode: {parse_mode}")

    output_format = _resolve(
        "MUSIC_IDS_OUTPUT_FORMAT", json_settings.get("output_format"), _DEFAULT_OUTPUT_FORMAT
    )
    if output_format not in _ALLOWED_OUTPUT_FORMATS:
        raise ValueError(f"Unsupported output format: {output_format}")

    backend = _resolve(
        "MUSIC_IDS_TAG_READER_BACKEND", json_settings.get("tag_reader_backend"), _DEFAULT_BACKEND
    )
    if backend not in _ALLOWED_BACKENDS:
        raise ValueError(f"Unsupported tag reader backend: {backend}")

    return Settings(
        parse_mode=parse_mode,
        output_format=output_format,
        tag_reader_backend=backend,
    )


def _resolve(env_var: str, config_value: Optional[str], default: str) -> str:
    return os.getenv(env_var) or config_value or default


def default_config_path() -> Path:
    return Path.home() / ".config" / "music-ids" / "settings.json"
