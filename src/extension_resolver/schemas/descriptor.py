"""Extension descriptor schema."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Tuple

from .coordinates import ArtifactCoords, ArtifactKey


@dataclass(frozen=True)
class ExtensionDescriptor:
    """Parsed extension descriptor of a single artifact.

    ``conditional_dependencies`` holds whatever the dependency factory
    produced, in declaration order. ``required_keys`` is the dependency
    condition: all keys must be present for the conditional dependencies to
    apply; an empty set means unconditional.
    """

    extension_id: ArtifactCoords
    deployment_coords: ArtifactCoords
    conditional_dependencies: Tuple[Any, ...] = ()
    required_keys: FrozenSet[ArtifactKey] = field(default_factory=frozenset)

    @property
    def is_conditional(self) -> bool:
        return bool(self.required_keys)
