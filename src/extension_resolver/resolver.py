"""Extension resolver: locate and parse descriptors across resolved artifacts."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, Iterator, Optional, Tuple

from extension_resolver.descriptor_parser import DependencyFactory, parse_descriptor
from extension_resolver.exceptions import (
    DescriptorFetchError,
    ExtensionResolutionError,
    ResolverError,
)
from extension_resolver.locator import DescriptorLocator
from extension_resolver.schemas import (
    ArtifactCoords,
    DependencyRequest,
    ExtensionDescriptor,
    FailureCode,
    ResolutionFailure,
    ResolutionReport,
    ResolvedArtifact,
    ResolverSettings,
)

logger = logging.getLogger(__name__)

_Outcome = Tuple[ResolvedArtifact, Optional[ExtensionDescriptor], Optional[ExtensionResolutionError]]


class ExtensionResolver:
    """Produces zero or one ExtensionDescriptor per resolved artifact.

    Every artifact is inspected independently; descriptors declared by
    different versions of the same extension are all returned.
    """

    def __init__(
        self,
        settings: Optional[ResolverSettings] = None,
        dependency_factory: Optional[DependencyFactory] = None,
        locator: Optional[DescriptorLocator] = None,
    ):
        self.settings = settings or ResolverSettings()
        self.dependency_factory = dependency_factory or DependencyRequest.from_notation
        self.locator = locator or DescriptorLocator(self.settings)

    def resolve_one(self, artifact: ResolvedArtifact) -> Optional[ExtensionDescriptor]:
        """Return the descriptor of a single artifact, or None if it is not an extension.

        Raises:
            ExtensionResolutionError: If the descriptor cannot be fetched or parsed
        """
        try:
            with self.locator.open(artifact) as stream:
                if stream is None:
                    return None
                return parse_descriptor(
                    stream,
                    artifact.coords,
                    dependency_factory=self.dependency_factory,
                    settings=self.settings,
                )
        except ResolverError as e:
            raise ExtensionResolutionError(artifact.coords, e) from e

    def resolve_all(
        self, artifacts: Iterable[ResolvedArtifact]
    ) -> Dict[ArtifactCoords, ExtensionDescriptor]:
        """Map each extension artifact's coordinate to its descriptor.

        Raises:
            ExtensionResolutionError: For the first artifact that fails
        """
        descriptors: Dict[ArtifactCoords, ExtensionDescriptor] = {}
        for artifact, descriptor, error in self._inspect(artifacts):
            if error is not None:
                raise error
            if descriptor is not None:
                descriptors[artifact.coords] = descriptor
        return descriptors

    def resolve_report(self, artifacts: Iterable[ResolvedArtifact]) -> ResolutionReport:
        """Resolve a batch, recording failures instead of aborting on them.

        With ``settings.fail_fast`` the first failure is raised as in
        resolve_all.
        """
        report = ResolutionReport()
        for artifact, descriptor, error in self._inspect(artifacts):
            if error is not None:
                if self.settings.fail_fast:
                    raise error
                logger.warning("Skipping %s: %s", artifact.coords, error.cause)
                report.failures.append(_to_failure(error))
            elif descriptor is not None:
                report.descriptors[artifact.coords] = descriptor
        logger.debug(
            "Resolved %d extension descriptors with %d failures",
            len(report.descriptors),
            len(report.failures),
        )
        return report

    def _inspect(self, artifacts: Iterable[ResolvedArtifact]) -> Iterator[_Outcome]:
        if self.settings.max_workers == 1:
            return (self._inspect_one(artifact) for artifact in artifacts)
        # Outcomes come back in input order and are merged by the calling thread.
        with ThreadPoolExecutor(max_workers=self.settings.max_workers) as pool:
            return iter(list(pool.map(self._inspect_one, artifacts)))

    def _inspect_one(self, artifact: ResolvedArtifact) -> _Outcome:
        try:
            return artifact, self.resolve_one(artifact), None
        except ExtensionResolutionError as e:
            return artifact, None, e


def _to_failure(error: ExtensionResolutionError) -> ResolutionFailure:
    cause = error.cause
    code = FailureCode.FETCH if isinstance(cause, DescriptorFetchError) else FailureCode.PARSE
    details = {"error_type": type(cause).__name__}
    if cause.__cause__ is not None:
        details["cause"] = str(cause.__cause__)
    return ResolutionFailure(
        coords=error.coords,
        code=code,
        message=str(cause),
        details=details,
    )
