"""Tag reader backends for extracting ISRC values from audio files."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
import json
import logging
import os
from pathlib import Path
from typing import Optional, Protocol

from mutagen import MutagenError
from mutagen.flac import FLAC
from mutagen.id3 import ID3, ID3NoHeaderError
from mutagen.mp4 import MP4
from mutagen.oggopus import OggOpus
from mutagen.oggvorbis import OggVorbis

from music_ids.core.isrc import ISRC
from music_ids.errors import IOFailure

logger = logging.getLogger(__name__)

AUDIO_EXTENSIONS = {".mp3", ".flac", ".m4a", ".mp4", ".ogg", ".opus"}

_ID3_FRAME = "TSRC"
_VORBIS_KEY = "isrc"
_MP4_KEY = "----:com.apple.iTunes:ISRC"


@dataclass(frozen=True)
class TrackISRC:
    """One ISRC tag value read from a file."""

    path: Path
    raw: str
    isrc: Optional[ISRC]

    @property
    def well_formed(self) -> bool:
        return self.isrc is not None and self.isrc.well_formed


class TagReader(Protocol):
    """Backend interface for reading raw ISRC tag values."""

    def read_isrcs(self, path: Path) -> list[str]:
        ...


def get_tag_reader(backend: str) -> TagReader:
    if backend == "meta-json":
        return MetaJsonTagReader()
    if backend == "mutagen":
        return MutagenTagReader()
    raise ValueError(f"Unknown tag reader backend: {backend}")


def _clean(values: Iterable[object]) -> list[str]:
    cleaned = []
    for value in values:
        if isinstance(value, bytes):
            value = value.decode("utf-8", errors="replace")
        text = str(value).strip()
        if text:
            cleaned.append(text)
    return cleaned


def _vorbis_isrcs(audio) -> list[str]:
    """Vorbis comment keys are case-insensitive; collect every ISRC field."""
    values: list[object] = []
    for key, found in (audio.tags or {}).items():
        if key.lower() == _VORBIS_KEY:
            values.extend(found)
    return _clean(values)


class MetaJsonTagReader:
    """Tag reader for .meta.json sidecars (fixtures and tag-less pipelines)."""

    def read_isrcs(self, path: Path) -> list[str]:
        meta_path = path.with_suffix(path.suffix + ".meta.json")
        if not meta_path.exists():
            return []
        try:
            data = json.loads(meta_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise IOFailure(f"Unreadable sidecar {meta_path}: {exc}") from exc
        tags = data.get("tags", {}) if isinstance(data, dict) else None
        if not isinstance(tags, dict):
            raise IOFailure(f"Sidecar {meta_path} has no \"tags\" object")
        value = tags.get("isrc")
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            return _clean(value)
        return _clean([value])


class MutagenTagReader:
    """Tag reader backed by mutagen for real audio files."""

    def read_isrcs(self, path: Path) -> list[str]:
        ext = path.suffix.lower()
        try:
            if ext == ".mp3":
                return self._read_id3(path)
            if ext == ".flac":
                return _vorbis_isrcs(FLAC(path))
            if ext == ".ogg":
                return _vorbis_isrcs(OggVorbis(path))
            if ext == ".opus":
                return _vorbis_isrcs(OggOpus(path))
            if ext in (".m4a", ".mp4"):
                return _clean(MP4(path).get(_MP4_KEY) or [])
        except (MutagenError, OSError) as exc:
            raise IOFailure(f"Cannot read tags from {path}: {exc}") from exc
        return []

    @staticmethod
    def _read_id3(path: Path) -> list[str]:
        try:
            tags = ID3(path)
        except ID3NoHeaderError:
            return []
        values: list[str] = []
        for frame in tags.getall(_ID3_FRAME):
            values.extend(_clean(frame.text))
        return values


def iter_audio_files(paths: Iterable[Path]) -> Iterator[Path]:
    """Yield audio files under `paths` in deterministic order.

    Symlink policy: do not follow symlinked directories and skip symlinked files.
    """
    for root in paths:
        if root.is_symlink():
            continue
        if root.is_file():
            if root.suffix.lower() in AUDIO_EXTENSIONS:
                yield root
            continue
        if not root.is_dir():
            raise IOFailure(f"Path does not exist: {root}")
        for dirpath, dirnames, filenames in os.walk(root, followlinks=False):
            dirnames.sort()
            for name in sorted(filenames):
                candidate = Path(dirpath) / name
                if candidate.is_symlink():
                    continue
                if candidate.suffix.lower() in AUDIO_EXTENSIONS:
                    yield candidate


def read_track_isrcs(
    path: Path, reader: TagReader, *, relaxed: bool = True
) -> list[TrackISRC]:
    """Read and parse every ISRC tag on one file.

    Raises:
        IOFailure: When the file's tags cannot be read
        InvalidFormat: In strict mode, on the first malformed tag value
    """
    results = []
    for raw in reader.read_isrcs(path):
        isrc = ISRC.parse(raw, relaxed=relaxed)
        if isrc is not None and not isrc.well_formed:
            logger.debug("Malformed ISRC tag in %s: %r", path, raw)
        results.append(TrackISRC(path=path, raw=raw, isrc=isrc))
    return results
