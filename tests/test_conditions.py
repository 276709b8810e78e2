"""Condition evaluator tests."""

from pathlib import Path
from types import SimpleNamespace

import pytest

from extension_resolver.conditions import (
    activate_conditional_dependencies,
    exists_by_name_only,
    satisfied,
)
from extension_resolver.schemas import (
    ArtifactCoords,
    ArtifactKey,
    DependencyRequest,
    ExtensionDescriptor,
    ResolvedArtifact,
)


def artifact(coords: str, extension: str = "jar") -> ResolvedArtifact:
    return ResolvedArtifact(
        coords=ArtifactCoords.from_string(coords),
        file=Path(f"/repo/{coords.replace(':', '_')}.{extension}"),
        extension=extension,
    )


def descriptor(extension: str, dependencies=(), condition=()) -> ExtensionDescriptor:
    return ExtensionDescriptor(
        extension_id=ArtifactCoords.from_string(extension),
        deployment_coords=ArtifactCoords.from_string(extension.replace(":1.0", "-deployment:1.0")),
        conditional_dependencies=tuple(DependencyRequest.from_notation(d) for d in dependencies),
        required_keys=frozenset(ArtifactKey.from_string(k) for k in condition),
    )


K1 = ArtifactKey.from_string("g:k1")
K2 = ArtifactKey.from_string("g:k2")


class TestSatisfied:
    """Tests for the strict, key-based condition check."""

    def test_empty_condition_always_holds(self):
        assert satisfied(frozenset(), [])
        assert satisfied(frozenset(), [artifact("g:x:1.0")])

    def test_subset_present(self):
        present = {artifact("g:k1:1.0"), artifact("g:k2:3.1"), artifact("g:k3:1.0")}
        assert satisfied({K1, K2}, present)

    def test_missing_key(self):
        present = {artifact("g:k1:1.0"), artifact("g:k3:1.0")}
        assert not satisfied({K1, K2}, present)

    def test_version_ignored(self):
        assert satisfied({K1}, [artifact("g:k1:99.0")])

    def test_classifier_mismatch(self):
        present = [artifact("g:b:x:jar:2.0")]
        assert not satisfied({ArtifactKey.from_string("g:b:y")}, present)
        assert satisfied({ArtifactKey.from_string("g:b:x")}, present)

    def test_type_mismatch(self):
        present = [artifact("g:k1:1.0", extension="pom")]
        assert not satisfied({K1}, present)
        assert satisfied({ArtifactKey.from_string("g:k1::pom")}, present)

    def test_accepts_generators(self):
        assert satisfied((k for k in [K1]), (a for a in [artifact("g:k1:1.0")]))


class TestExistsByNameOnly:
    def test_ignores_classifier_and_version(self):
        present = [artifact("g:b:x:jar:2.0")]
        assert exists_by_name_only(present, DependencyRequest(group="g", name="b", version="1.0"))

    def test_group_must_match(self):
        present = [artifact("other:b:1.0")]
        assert not exists_by_name_only(present, DependencyRequest(group="g", name="b", version="1.0"))

    def test_any_object_with_group_and_name(self):
        present = [artifact("g:b:1.0")]
        assert exists_by_name_only(present, SimpleNamespace(group="g", name="b"))
        assert not exists_by_name_only(present, SimpleNamespace(group="g", name="c"))

    def test_empty_set(self):
        assert not exists_by_name_only([], DependencyRequest(group="g", name="b", version="1.0"))

    def test_looser_than_key_match(self):
        present = [artifact("g:b:x:jar:2.0")]
        assert exists_by_name_only(present, DependencyRequest(group="g", name="b", version="2.0"))
        assert not satisfied({ArtifactKey(group_id="g", artifact_id="b", classifier="y")}, present)


class TestActivateConditionalDependencies:
    """Tests for selecting the conditional dependencies to add."""

    def test_satisfied_descriptor_contributes_in_order(self):
        descriptors = [descriptor("g:a:1.0", ["g:b:1.0", "g:c:1.0"], ["g:d"])]
        present = [artifact("g:a:1.0"), artifact("g:d:1.0")]
        selected = activate_conditional_dependencies(descriptors, present)
        assert [d.to_notation() for d in selected] == ["g:b:1.0", "g:c:1.0"]

    def test_unsatisfied_descriptor_skipped(self):
        descriptors = [descriptor("g:a:1.0", ["g:b:1.0"], ["g:d"])]
        assert activate_conditional_dependencies(descriptors, [artifact("g:a:1.0")]) == []

    def test_unconditional_descriptor(self):
        descriptors = [descriptor("g:a:1.0", ["g:b:1.0"])]
        selected = activate_conditional_dependencies(descriptors, [])
        assert selected == [DependencyRequest(group="g", name="b", version="1.0")]

    def test_already_present_dependency_skipped(self):
        descriptors = [descriptor("g:a:1.0", ["g:b:1.0", "g:c:1.0"])]
        selected = activate_conditional_dependencies(descriptors, [artifact("g:b:2.0")])
        assert [d.name for d in selected] == ["c"]

    def test_duplicates_across_descriptors_collapsed(self):
        descriptors = {
            ArtifactCoords.from_string("g:a:1.0"): descriptor("g:a:1.0", ["g:c:1.0"]),
            ArtifactCoords.from_string("g:e:1.0"): descriptor("g:e:1.0", ["g:c:1.1", "g:f:1.0"]),
        }
        selected = activate_conditional_dependencies(descriptors, [])
        assert [d.to_notation() for d in selected] == ["g:c:1.0", "g:f:1.0"]

    def test_selected_dependencies_do_not_satisfy_other_conditions(self):
        descriptors = [
            descriptor("g:a:1.0", ["g:b:1.0"]),
            descriptor("g:e:1.0", ["g:f:1.0"], ["g:b"]),
        ]
        selected = activate_conditional_dependencies(descriptors, [])
        assert [d.to_notation() for d in selected] == ["g:b:1.0"]

        resolved = [artifact(d.to_notation()) for d in selected]
        second_pass = activate_conditional_dependencies(descriptors, resolved)
        assert [d.to_notation() for d in second_pass] == ["g:f:1.0"]


@pytest.mark.parametrize("present", [[], [artifact("g:x:1.0")]])
def test_descriptor_without_condition_is_satisfied(present):
    assert satisfied(descriptor("g:a:1.0").required_keys, present)
