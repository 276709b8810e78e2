"""Resolver settings schema."""

from __future__ import annotations

from typing import List

from pydantic import Field, field_validator

from .base import SchemaBase

DESCRIPTOR_PATH = "META-INF/quarkus-extension.properties"
PROP_DEPLOYMENT_ARTIFACT = "deployment-artifact"
CONDITIONAL_DEPENDENCIES = "conditional-dependencies"
DEPENDENCY_CONDITION = "dependency-condition"


class ResolverSettings(SchemaBase):
    descriptor_path: str = Field(default=DESCRIPTOR_PATH)
    archive_types: List[str] = Field(default_factory=lambda: ["jar"])
    deployment_artifact_key: str = Field(default=PROP_DEPLOYMENT_ARTIFACT)
    conditional_dependencies_key: str = Field(default=CONDITIONAL_DEPENDENCIES)
    dependency_condition_key: str = Field(default=DEPENDENCY_CONDITION)
    fail_fast: bool = Field(default=True)
    max_workers: int = Field(default=1, ge=1)

    @field_validator("descriptor_path")
    @classmethod
    def _relative_path(cls, value: str) -> str:
        if not value or value.startswith("/"):
            raise ValueError("descriptor_path must be a non-empty relative path")
        return value

    @field_validator("archive_types")
    @classmethod
    def _archive_types(cls, value: List[str]) -> List[str]:
        if not value or any(not t for t in value):
            raise ValueError("archive_types must list at least one non-empty type")
        return value
