"""Shared fixtures: build extension artifacts on disk."""

import struct
import zipfile
from pathlib import Path

import pytest

from extension_resolver.schemas import DESCRIPTOR_PATH, ArtifactCoords, ResolvedArtifact

DESCRIPTOR = (
    "# extension metadata\n"
    "deployment-artifact=g:a-deployment:1.0\n"
    "conditional-dependencies=g:b:1.0 g:c:1.0\n"
    "dependency-condition=g:d\n"
)


def _artifact(coords: str, file: Path, extension: str = "jar") -> ResolvedArtifact:
    return ResolvedArtifact(coords=ArtifactCoords.from_string(coords), file=file, extension=extension)


@pytest.fixture
def make_artifact():
    """Resolved artifact pointing at an arbitrary location."""
    return _artifact


@pytest.fixture
def dir_artifact(tmp_path):
    """Factory for exploded-directory artifacts, optionally with a descriptor."""

    def build(coords: str = "g:a:1.0", descriptor=DESCRIPTOR, name: str = "classes"):
        root = tmp_path / name
        root.mkdir(parents=True)
        if descriptor is not None:
            path = root / DESCRIPTOR_PATH
            path.parent.mkdir(parents=True)
            path.write_text(descriptor, encoding="utf-8")
        return _artifact(coords, root)

    return build


@pytest.fixture
def jar_artifact(tmp_path):
    """Factory for jar artifacts, optionally with a descriptor entry."""

    def build(coords: str = "g:a:1.0", descriptor=DESCRIPTOR, name: str = "a-1.0.jar"):
        path = tmp_path / name
        with zipfile.ZipFile(path, "w") as archive:
            archive.writestr("org/acme/Thing.class", b"\xca\xfe\xba\xbe")
            if descriptor is not None:
                archive.writestr(DESCRIPTOR_PATH, descriptor)
        return _artifact(coords, path)

    return build


@pytest.fixture
def corrupt_jar_artifact(tmp_path):
    """Factory for jars whose deflated descriptor entry holds garbage bytes.

    The central directory stays valid, so the entry is found and fails on read.
    """

    def build(coords: str = "g:corrupt:1.0", name: str = "corrupt-1.0.jar"):
        path = tmp_path / name
        with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            archive.writestr(DESCRIPTOR_PATH, DESCRIPTOR * 4)
        with zipfile.ZipFile(path) as archive:
            info = archive.getinfo(DESCRIPTOR_PATH)
        data = bytearray(path.read_bytes())
        name_length, extra_length = struct.unpack("<HH", data[info.header_offset + 26:info.header_offset + 30])
        start = info.header_offset + 30 + name_length + extra_length
        data[start:start + info.compress_size] = b"\xff" * info.compress_size
        path.write_bytes(bytes(data))
        return _artifact(coords, path)

    return build
