"""Resolution failure records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from pydantic import Field

from .base import SchemaBase, Severity
from .coordinates import ArtifactCoords
from .descriptor import ExtensionDescriptor


class FailureCode(str, Enum):
    FETCH = "fetch"
    PARSE = "parse"


class ResolutionFailure(SchemaBase):
    coords: ArtifactCoords
    code: FailureCode
    message: str
    severity: Severity = Field(default=Severity.ERROR)
    details: Dict[str, Any] = Field(default_factory=dict)


@dataclass
class ResolutionReport:
    """Outcome of a resolution pass that keeps going past failures."""

    descriptors: Dict[ArtifactCoords, ExtensionDescriptor] = field(default_factory=dict)
    failures: List[ResolutionFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
