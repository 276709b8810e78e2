"""Schema exports."""

from .base import FrozenSchemaBase, SchemaBase, Severity
from .coordinates import ArtifactCoords, ArtifactKey, DependencyRequest, ResolvedArtifact
from .descriptor import ExtensionDescriptor
from .errors import FailureCode, ResolutionFailure, ResolutionReport
from .settings import (
    CONDITIONAL_DEPENDENCIES,
    DEPENDENCY_CONDITION,
    DESCRIPTOR_PATH,
    PROP_DEPLOYMENT_ARTIFACT,
    ResolverSettings,
)

__all__ = [
    "FrozenSchemaBase",
    "SchemaBase",
    "Severity",
    "ArtifactCoords",
    "ArtifactKey",
    "DependencyRequest",
    "ResolvedArtifact",
    "ExtensionDescriptor",
    "FailureCode",
    "ResolutionFailure",
    "ResolutionReport",
    "CONDITIONAL_DEPENDENCIES",
    "DEPENDENCY_CONDITION",
    "DESCRIPTOR_PATH",
    "PROP_DEPLOYMENT_ARTIFACT",
    "ResolverSettings",
]
