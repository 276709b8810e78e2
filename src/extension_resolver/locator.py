"""Locates the extension descriptor inside a resolved artifact."""

from __future__ import annotations

import io
import logging
import zipfile
import zlib
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional

from extension_resolver.exceptions import DescriptorFetchError
from extension_resolver.schemas import ResolvedArtifact, ResolverSettings

logger = logging.getLogger(__name__)


class DescriptorLocator:
    """Finds the descriptor resource of an artifact directory or archive.

    A missing artifact, a missing descriptor or an artifact type that is not
    an archive all mean "absent" and yield ``None``. Failing to read a
    location that does exist raises DescriptorFetchError.
    """

    def __init__(self, settings: Optional[ResolverSettings] = None):
        self.settings = settings or ResolverSettings()

    @contextmanager
    def open(self, artifact: ResolvedArtifact) -> Iterator[Optional[BinaryIO]]:
        """Yield a binary stream over the descriptor, or None when absent.

        Raises:
            DescriptorFetchError: If an existing directory or archive cannot be read
        """
        path = Path(artifact.file)
        if not _exists(path):
            logger.debug("Artifact file %s of %s does not exist", path, artifact.coords)
            yield None
        elif _is_dir(path):
            with self._open_in_directory(path) as stream:
                yield stream
        elif artifact.extension in self.settings.archive_types:
            yield self._read_from_archive(path)
        else:
            yield None

    def locate(self, artifact: ResolvedArtifact) -> Optional[bytes]:
        """Return the raw descriptor content, or None when absent."""
        with self.open(artifact) as stream:
            if stream is None:
                return None
            try:
                return stream.read()
            except OSError as e:
                raise DescriptorFetchError(artifact.file, str(e)) from e

    @contextmanager
    def _open_in_directory(self, path: Path) -> Iterator[Optional[BinaryIO]]:
        descriptor = path / self.settings.descriptor_path
        if not _exists(descriptor):
            yield None
            return
        try:
            stream = descriptor.open("rb")
        except OSError as e:
            raise DescriptorFetchError(descriptor, str(e)) from e
        with stream:
            yield stream

    def _read_from_archive(self, path: Path) -> Optional[BinaryIO]:
        # The archive is opened once and closed before the entry is handed out.
        try:
            with zipfile.ZipFile(path) as archive:
                try:
                    info = archive.getinfo(self.settings.descriptor_path)
                except KeyError:
                    return None
                with archive.open(info) as entry:
                    return io.BytesIO(entry.read())
        except (zipfile.BadZipFile, zlib.error, OSError, EOFError, RuntimeError) as e:
            raise DescriptorFetchError(path, str(e)) from e


def _exists(path: Path) -> bool:
    # Only non-existence is absence; other stat failures are fetch errors.
    try:
        path.stat()
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as e:
        raise DescriptorFetchError(path, str(e)) from e
    return True


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError as e:
        raise DescriptorFetchError(path, str(e)) from e
