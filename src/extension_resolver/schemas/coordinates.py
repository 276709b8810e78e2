"""Artifact coordinate, key and dependency value types."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field

from extension_resolver.exceptions import CoordinateFormatError

from .base import FrozenSchemaBase

DEFAULT_TYPE = "jar"


class ArtifactKey(FrozenSchemaBase):
    """Version-less identity of an artifact.

    Two artifacts with the same key but different versions are the same
    dependency for presence checks.
    """

    group_id: str
    artifact_id: str
    classifier: str = Field(default="")
    type: str = Field(default=DEFAULT_TYPE)

    @classmethod
    def from_string(cls, value: Optional[str]) -> "ArtifactKey":
        """Parse ``group:artifact[:classifier[:type]]``.

        Raises:
            CoordinateFormatError: If the string does not follow the grammar
        """
        if value is None:
            raise CoordinateFormatError("None", "artifact key is missing")
        parts = value.strip().split(":")
        if len(parts) < 2 or len(parts) > 4:
            raise CoordinateFormatError(
                value, "expected group:artifact[:classifier[:type]]"
            )
        if not parts[0] or not parts[1]:
            raise CoordinateFormatError(value, "group and artifact id are required")
        classifier = parts[2] if len(parts) > 2 else ""
        type_ = parts[3] if len(parts) > 3 and parts[3] else DEFAULT_TYPE
        return cls(group_id=parts[0], artifact_id=parts[1], classifier=classifier, type=type_)

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.classifier}:{self.type}"


class ArtifactCoords(FrozenSchemaBase):
    """Full artifact coordinate: key plus version."""

    group_id: str
    artifact_id: str
    version: str
    classifier: str = Field(default="")
    type: str = Field(default=DEFAULT_TYPE)

    @classmethod
    def from_string(cls, value: Optional[str]) -> "ArtifactCoords":
        """Parse ``g:a:v``, ``g:a:type:v`` or ``g:a:classifier:type:v``.

        The version is always the last segment.

        Raises:
            CoordinateFormatError: If the string does not follow the grammar
        """
        if value is None:
            raise CoordinateFormatError("None", "coordinate is missing")
        parts = value.strip().split(":")
        if len(parts) == 3:
            group_id, artifact_id, version = parts
            classifier, type_ = "", DEFAULT_TYPE
        elif len(parts) == 4:
            group_id, artifact_id, type_, version = parts
            classifier = ""
        elif len(parts) == 5:
            group_id, artifact_id, classifier, type_, version = parts
        else:
            raise CoordinateFormatError(
                value, "expected group:artifact[:classifier:type]:version"
            )
        if not group_id or not artifact_id:
            raise CoordinateFormatError(value, "group and artifact id are required")
        if not version:
            raise CoordinateFormatError(value, "version is missing")
        return cls(
            group_id=group_id,
            artifact_id=artifact_id,
            version=version,
            classifier=classifier,
            type=type_ or DEFAULT_TYPE,
        )

    @property
    def key(self) -> ArtifactKey:
        return ArtifactKey(
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            classifier=self.classifier,
            type=self.type,
        )

    def to_notation(self) -> str:
        """Return the ``group:artifact:version`` dependency notation."""
        return ":".join((self.group_id, self.artifact_id, self.version))

    def __str__(self) -> str:
        if not self.classifier and self.type == DEFAULT_TYPE:
            return self.to_notation()
        return f"{self.group_id}:{self.artifact_id}:{self.classifier}:{self.type}:{self.version}"


class ResolvedArtifact(FrozenSchemaBase):
    """An artifact resolved by the host build tool.

    ``file`` is either an exploded directory or an archive; ``extension`` is
    the declared artifact type (e.g. ``jar``).
    """

    coords: ArtifactCoords
    file: Path
    extension: str = Field(default=DEFAULT_TYPE)

    @property
    def group(self) -> str:
        return self.coords.group_id

    @property
    def name(self) -> str:
        return self.coords.artifact_id

    @property
    def key(self) -> ArtifactKey:
        return ArtifactKey(
            group_id=self.coords.group_id,
            artifact_id=self.coords.artifact_id,
            classifier=self.coords.classifier,
            type=self.extension,
        )


class DependencyRequest(FrozenSchemaBase):
    """Unresolved ``group:name:version`` dependency reference."""

    group: str
    name: str
    version: str

    @classmethod
    def from_notation(cls, notation: str) -> "DependencyRequest":
        """Default dependency factory.

        Raises:
            CoordinateFormatError: If ``notation`` is not a valid coordinate
        """
        coords = ArtifactCoords.from_string(notation)
        return cls(group=coords.group_id, name=coords.artifact_id, version=coords.version)

    def to_notation(self) -> str:
        return ":".join((self.group, self.name, self.version))

    def __str__(self) -> str:
        return self.to_notation()
