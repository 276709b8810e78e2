"""Parses extension descriptor streams into ExtensionDescriptor objects."""

from __future__ import annotations

import io
import logging
from typing import Any, BinaryIO, Callable, Dict, List, Optional

from extension_resolver.exceptions import CoordinateFormatError, DescriptorParseError
from extension_resolver.schemas import (
    ArtifactCoords,
    ArtifactKey,
    DependencyRequest,
    ExtensionDescriptor,
    ResolverSettings,
)
from extension_resolver.utils import parse_properties, split_by_whitespace

logger = logging.getLogger(__name__)

DependencyFactory = Callable[[str], Any]


def load_properties(stream: BinaryIO) -> Dict[str, str]:
    """Read a UTF-8 properties stream.

    Raises:
        DescriptorParseError: If the stream cannot be read or decoded
    """
    try:
        text = stream.read().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DescriptorParseError(_stream_name(stream), f"unreadable content: {e}") from e
    return parse_properties(io.StringIO(text))


def parse_dependency_condition(value: Optional[str]) -> Optional[List[ArtifactKey]]:
    """Parse a dependency condition into artifact keys.

    Returns None when no condition is declared.

    Raises:
        CoordinateFormatError: If a token is not a valid artifact key
    """
    if value is None:
        return None
    return [ArtifactKey.from_string(token) for token in split_by_whitespace(value)]


def parse_descriptor(
    stream: BinaryIO,
    extension_id: ArtifactCoords,
    dependency_factory: Optional[DependencyFactory] = None,
    settings: Optional[ResolverSettings] = None,
) -> ExtensionDescriptor:
    """Build an ExtensionDescriptor from a descriptor stream.

    Args:
        stream: Binary stream over the descriptor resource
        extension_id: Coordinate of the artifact carrying the descriptor
        dependency_factory: Turns ``group:artifact:version`` into the caller's
            dependency object; defaults to DependencyRequest.from_notation
        settings: Property names to read; defaults to ResolverSettings()

    Returns:
        Fully populated, immutable ExtensionDescriptor

    Raises:
        DescriptorParseError: On unreadable content, a missing or malformed
            deployment coordinate, a malformed conditional dependency or
            condition token, or a failing dependency factory
    """
    settings = settings or ResolverSettings()
    factory = dependency_factory or DependencyRequest.from_notation
    source = str(extension_id)

    properties = load_properties(stream)

    deployment = properties.get(settings.deployment_artifact_key)
    if deployment is None:
        raise DescriptorParseError(source, "missing deployment coordinate")
    try:
        deployment_coords = ArtifactCoords.from_string(deployment)
    except CoordinateFormatError as e:
        raise DescriptorParseError(source, f"malformed deployment coordinate: {e}") from e

    conditional_dependencies = []
    if settings.conditional_dependencies_key in properties:
        for token in split_by_whitespace(properties[settings.conditional_dependencies_key]):
            conditional_dependencies.append(_create_dependency(source, token, factory))

    try:
        constraints = parse_dependency_condition(properties.get(settings.dependency_condition_key))
    except CoordinateFormatError as e:
        raise DescriptorParseError(source, f"malformed dependency condition: {e}") from e

    logger.debug(
        "Parsed extension %s: deployment=%s, %d conditional dependencies, %d required keys",
        source,
        deployment_coords,
        len(conditional_dependencies),
        len(constraints or []),
    )
    return ExtensionDescriptor(
        extension_id=extension_id,
        deployment_coords=deployment_coords,
        conditional_dependencies=tuple(conditional_dependencies),
        required_keys=frozenset(constraints or []),
    )


def _create_dependency(source: str, token: str, factory: DependencyFactory) -> Any:
    try:
        coords = ArtifactCoords.from_string(token)
    except CoordinateFormatError as e:
        raise DescriptorParseError(source, f"malformed conditional dependency: {e}") from e
    try:
        return factory(coords.to_notation())
    except Exception as e:
        raise DescriptorParseError(
            source, f"cannot create dependency '{coords.to_notation()}': {e}"
        ) from e


def _stream_name(stream) -> str:
    return str(getattr(stream, "name", "<stream>"))
