"""Dependency condition evaluation against the artifacts present in a build."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, List, Protocol, Set, Union

from extension_resolver.schemas import ArtifactKey, ExtensionDescriptor, ResolvedArtifact


class NamedDependency(Protocol):
    """Anything carrying a dependency group and name."""

    group: str
    name: str


def satisfied(required_keys: Iterable[ArtifactKey], present_artifacts: Iterable[ResolvedArtifact]) -> bool:
    """True when every required key is present; an empty condition always holds.

    Matching is on group, name, classifier and type. Versions are ignored.
    """
    present_keys: Set[ArtifactKey] = {artifact.key for artifact in present_artifacts}
    return present_keys.issuperset(required_keys)


def exists_by_name_only(present_artifacts: Iterable[ResolvedArtifact], dependency: NamedDependency) -> bool:
    """True when an artifact with the dependency's group and name is present.

    Looser than satisfied(): classifier, type and version are not compared.
    """
    for artifact in present_artifacts:
        if artifact.group == dependency.group and artifact.name == dependency.name:
            return True
    return False


def activate_conditional_dependencies(
    descriptors: Union[Mapping[Any, ExtensionDescriptor], Iterable[ExtensionDescriptor]],
    present_artifacts: Iterable[ResolvedArtifact],
) -> List[Any]:
    """Collect the conditional dependencies that should join the build.

    A descriptor contributes only when its condition is satisfied. Dependencies
    already present by group and name, or already selected, are skipped.
    Declaration order is kept.

    Conditions are checked against ``present_artifacts`` only. Dependencies
    selected here are unresolved requests and do not satisfy other conditions;
    callers run another pass once the host has resolved them.
    """
    if isinstance(descriptors, Mapping):
        descriptors = descriptors.values()
    present = list(present_artifacts)

    selected: List[Any] = []
    for descriptor in descriptors:
        if not satisfied(descriptor.required_keys, present):
            continue
        for dependency in descriptor.conditional_dependencies:
            if exists_by_name_only(present, dependency):
                continue
            if any(d.group == dependency.group and d.name == dependency.name for d in selected):
                continue
            selected.append(dependency)
    return selected
