"""Test helper utilities."""

from .fs import (
    AudioStubSpec,
    AlbumFixture,
    build_album_dir,
    create_audio_stub,
    create_non_audio_stub,
    write_id3_isrcs,
)

__all__ = [
    "AudioStubSpec",
    "AlbumFixture",
    "build_album_dir",
    "create_audio_stub",
    "create_non_audio_stub",
    "write_id3_isrcs",
]
