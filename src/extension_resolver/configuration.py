"""Dependency configuration helpers for the host build adapter.

Plain models standing in for the host tool's configuration and dependency
handles, plus notation formatting.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, TypeVar

from extension_resolver.schemas import ArtifactCoords

COPY_CONFIGURATION_NAME = "quarkusDependency"
TEST_FIXTURE_SUFFIX = "-test-fixtures"

T = TypeVar("T")


@dataclass(frozen=True)
class ModuleDependency:
    """A declared module dependency."""
    group: str
    name: str
    version: Optional[str] = None
    requested_capabilities: tuple = ()  # capability names
    enforced_platform: bool = False


@dataclass
class Configuration:
    name: str
    dependencies: List[ModuleDependency] = field(default_factory=list)
    dependency_constraints: List[ModuleDependency] = field(default_factory=list)


class ConfigurationContainer:
    """Named configurations of a project."""

    def __init__(self):
        self._configurations: Dict[str, Configuration] = {}

    def create(self, name: str) -> Configuration:
        if name in self._configurations:
            raise ValueError(f"Configuration '{name}' already exists")
        configuration = Configuration(name=name)
        self._configurations[name] = configuration
        return configuration

    def find_by_name(self, name: str) -> Optional[Configuration]:
        return self._configurations.get(name)

    def remove(self, configuration: Configuration) -> None:
        self._configurations.pop(configuration.name, None)

    def __contains__(self, name: str) -> bool:
        return name in self._configurations


def duplicate_configuration(
    container: ConfigurationContainer, to_duplicate: Configuration
) -> Configuration:
    """Create a fresh scratch copy of a configuration for resolution work.

    Any previous copy is replaced. The copy keeps enforced platforms first,
    then every constraint and every dependency except test fixtures.
    """
    existing = container.find_by_name(COPY_CONFIGURATION_NAME)
    if existing is not None:
        container.remove(existing)
    copy = container.create(COPY_CONFIGURATION_NAME)

    # Platforms (BOMs) drive version alignment during resolution
    copy.dependencies.extend(d for d in to_duplicate.dependencies if d.enforced_platform)
    copy.dependency_constraints.extend(to_duplicate.dependency_constraints)
    for dependency in to_duplicate.dependencies:
        if dependency.enforced_platform or is_test_fixture_dependency(dependency):
            continue
        copy.dependencies.append(dependency)
    return copy


def is_test_fixture_dependency(dependency) -> bool:
    capabilities = getattr(dependency, "requested_capabilities", None)
    if not capabilities:
        return False
    return any(name.endswith(TEST_FIXTURE_SUFFIX) for name in capabilities)


def as_dependency_notation(dependency) -> str:
    """``group:name:version`` for a dependency or an ArtifactCoords."""
    if isinstance(dependency, ArtifactCoords):
        return dependency.to_notation()
    return ":".join((dependency.group, dependency.name, dependency.version or ""))


def as_capability_notation(coords: ArtifactCoords) -> str:
    return ":".join((coords.group_id, coords.artifact_id + "-capability", coords.version))


def included_build(builds: Mapping[str, T], name: str) -> Optional[T]:
    """Look up an included build by name; None when there is none."""
    return builds.get(name)
