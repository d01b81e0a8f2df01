"""Filesystem scaffolding helpers for tests."""

from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path

from mutagen.id3 import ID3, TSRC


@dataclass(frozen=True)
class AudioStubSpec:
    """Specification for an audio stub file."""
    filename: str
    isrc: str | list[str] | None = None
    size_bytes: int = 2048


@dataclass(frozen=True)
class AlbumFixture:
    """Represents a created album fixture on disk."""
    name: str
    path: Path
    audio_files: list[Path]
    non_audio_files: list[Path]


def create_audio_stub(path: Path, spec: AudioStubSpec) -> Path:
    """Create an audio stub file with a .meta.json sidecar holding its tags."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"\0" * spec.size_bytes)

    tags = {} if spec.isrc is None else {"isrc": spec.isrc}
    metadata_path = path.with_suffix(path.suffix + ".meta.json")
    metadata_path.write_text(json.dumps({"tags": tags}, indent=2))
    return path


def create_non_audio_stub(path: Path) -> Path:
    """Create a non-audio stub file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("stub")
    return path


def write_id3_isrcs(path: Path, *values: str) -> Path:
    """Write a real ID3v2 tag carrying TSRC frames (no audio frames needed)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if not path.exists():
        path.write_bytes(b"\0" * 256)
    tags = ID3()
    tags.add(TSRC(encoding=3, text=list(values)))
    tags.save(path)
    return path


def build_album_dir(
    base_dir: Path,
    name: str,
    audio_specs: list[AudioStubSpec],
    non_audio_files: list[str] | None = None,
) -> AlbumFixture:
    """Create an album directory with audio and non-audio stubs."""
    album_dir = base_dir / name
    album_dir.mkdir(parents=True, exist_ok=True)

    audio_files: list[Path] = []
    for spec in audio_specs:
        audio_files.append(create_audio_stub(album_dir / spec.filename, spec))

    non_audio_paths: list[Path] = []
    for filename in non_audio_files or []:
        non_audio_paths.append(create_non_audio_stub(album_dir / filename))

    return AlbumFixture(
        name=name,
        path=album_dir,
        audio_files=audio_files,
        non_audio_files=non_audio_paths,
    )
