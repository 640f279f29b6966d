"""Reference manager API for operating on the build reference registry"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..constants import UNSET, ReferenceOperation, DEFAULT_REFERENCE_OPERATION
from ..core.git_tag_resolver import GitTagResolver
from ..core.image_verifier import ImageVerifier
from ..core.publisher import ResultPublisher
from ..core.registry import BuildReferenceRegistry
from ..images import ImageManagerFactory
from ..models.config import ToolConfig
from ..models.operation import OperationRequest, UnitRequest
from ..models.reference import BuildReference, DeploymentUnitLocation
from ..models.result import OperationResult, UnitResult, UnitStatus


class ReferenceManager:
    """Run one operation over a list of deployment units

    Units are processed in list order. Any error aborts the run;
    records written for earlier units are kept.
    """

    def __init__(self,
                 config: Optional[ToolConfig] = None,
                 image_factory: Optional[ImageManagerFactory] = None,
                 tag_resolver: Optional[GitTagResolver] = None,
                 publisher: Optional[ResultPublisher] = None):
        """
        Initialize reference manager

        Args:
            config: Tool configuration
            image_factory: Source of the per-format image managers
            tag_resolver: Resolver for release tags
            publisher: Publisher of the run's context
        """
        self.config = config or ToolConfig()
        self.verifier = ImageVerifier(self.config, image_factory)
        self.tag_resolver = tag_resolver or GitTagResolver(self.config)
        self.publisher = publisher or ResultPublisher(self.config)
        self.logger = logging.getLogger("ReferenceManager")

        self._handlers = {
            ReferenceOperation.ACCEPT: self._accept,
            ReferenceOperation.LIST: self._list,
            ReferenceOperation.LISTFULL: self._list_full,
            ReferenceOperation.UPDATE: self._update,
            ReferenceOperation.VERIFY: self._verify,
        }

    def run(self, request: OperationRequest) -> OperationResult:
        """
        Execute an operation request

        Args:
            request: Operation and its inputs

        Returns:
            Operation result with published context

        Raises:
            ArgumentError: If the operation's preconditions are not met
            UnknownFormatError: If a supplied image format is not supported
            BuildRefError: On any other fatal condition
        """
        request.validate()
        for entry in request.image_formats:
            if entry != UNSET:
                self.verifier.parse_formats(entry)

        registry = BuildReferenceRegistry(request.registry_root)
        registry.ensure_root()

        operation = request.operation
        units = request.units
        if operation == ReferenceOperation.LISTFULL:
            units = registry.discover_units()

        self.logger.info(f"Running {operation.value} for {len(units)} deployment unit(s)")

        handler = self._handlers[operation]
        result = OperationResult(operation=operation)
        for index, unit in enumerate(units):
            unit_request = request.unit_request(index, unit)
            # Discovered units are already the units holding the records
            location = registry.locate(
                unit, follow_indirection=operation != ReferenceOperation.LISTFULL
            )
            unit_result = result.add_unit(UnitResult(
                unit=unit,
                commit=unit_request.commit,
                tag=unit_request.tag,
                formats=unit_request.formats,
                effective_unit=location.effective,
            ))
            handler(request, unit_request, location, unit_result, result, registry)

        result.complete()
        self.publisher.publish(result)
        return result

    def _skip(self, unit_result: UnitResult, message: str, warn: bool = False) -> None:
        unit_result.status = UnitStatus.SKIPPED
        unit_result.message = message
        if warn:
            self.logger.warning(message)
        else:
            self.logger.info(message)

    def _skip_indirected(self, unit_result: UnitResult) -> None:
        self._skip(
            unit_result,
            f'Ignoring the "{unit_result.unit}" deployment unit - it contains a reference '
            f'to the "{unit_result.effective_unit}" deployment unit',
            warn=True,
        )

    def _accept(self, request: OperationRequest, unit_request: UnitRequest,
                location: DeploymentUnitLocation, unit_result: UnitResult,
                result: OperationResult, registry: BuildReferenceRegistry) -> None:
        if unit_request.formats is None:
            self._skip(unit_result, f"No image formats for {unit_request.unit}")
            return

        for image_format in self.verifier.parse_formats(unit_request.formats):
            self.verifier.accept(
                unit_request.unit, unit_request.commit, image_format, request.acceptance_tag
            )
        unit_result.status = UnitStatus.ACCEPTED

    def _list(self, request: OperationRequest, unit_request: UnitRequest,
              location: DeploymentUnitLocation, unit_result: UnitResult,
              result: OperationResult, registry: BuildReferenceRegistry) -> None:
        result.update_detail(unit_result)
        unit_result.status = UnitStatus.LISTED

    def _list_full(self, request: OperationRequest, unit_request: UnitRequest,
                   location: DeploymentUnitLocation, unit_result: UnitResult,
                   result: OperationResult, registry: BuildReferenceRegistry) -> None:
        reference = registry.read(location)
        if reference is not None and reference.commit is not None and not location.is_indirected:
            unit_result.commit = reference.commit
            unit_result.tag = reference.tag
            # An empty formats list publishes as unset to keep list positions
            if reference.formats:
                unit_result.formats = self.config.join_formats(reference.formats)
            else:
                unit_result.formats = None

        result.update_detail(unit_result)
        unit_result.status = UnitStatus.LISTED

    def _update(self, request: OperationRequest, unit_request: UnitRequest,
                location: DeploymentUnitLocation, unit_result: UnitResult,
                result: OperationResult, registry: BuildReferenceRegistry) -> None:
        if unit_request.commit is None:
            self._skip(unit_result, f"No commit for {unit_request.unit}")
            return
        if location.is_indirected:
            self._skip_indirected(unit_result)
            return

        if unit_request.formats is not None:
            formats = self.config.split_formats(unit_request.formats)
        else:
            existing = registry.read_structured(location)
            formats = existing.formats if existing is not None else None

        reference = BuildReference(
            commit=unit_request.commit,
            tag=unit_request.tag,
            formats=formats or None,
        )
        registry.write(location, reference)

        unit_result.commit = reference.commit.lower()
        if reference.formats is not None:
            unit_result.formats = self.config.join_formats(reference.formats)
        unit_result.status = UnitStatus.UPDATED

    def _verify(self, request: OperationRequest, unit_request: UnitRequest,
                location: DeploymentUnitLocation, unit_result: UnitResult,
                result: OperationResult, registry: BuildReferenceRegistry) -> None:
        unit = unit_request.unit
        commit = unit_request.commit

        if commit is None and unit_request.tag is None:
            # No release needed for this unit
            self._skip(unit_result, f"Nothing to verify for {unit}")
            return
        if location.is_indirected:
            self._skip_indirected(unit_result)
            return

        if commit is None:
            if unit_request.repo is None or unit_request.provider is None:
                self._skip(
                    unit_result,
                    f'Ignoring tag for the "{unit}" deployment unit - no code repo and/or provider defined',
                    warn=True,
                )
                return
            resolution = self.tag_resolver.resolve(
                unit_request.provider, unit_request.repo, unit_request.tag
            )
            commit = resolution.commit

        if unit_request.formats is not None:
            formats_entry = unit_request.formats
        else:
            existing = registry.read_structured(location)
            formats_entry = None
            if existing is not None and existing.formats:
                formats_entry = self.config.join_formats(existing.formats)

        for image_format in self.verifier.parse_formats(formats_entry):
            self.verifier.ensure_available(unit, commit, image_format, request.verification_tag)

        unit_result.commit = commit
        unit_result.formats = formats_entry
        unit_result.status = UnitStatus.VERIFIED


def manage(operation: Union[str, ReferenceOperation] = DEFAULT_REFERENCE_OPERATION,
           units: Optional[str] = None,
           commits: Optional[str] = None,
           tags: Optional[str] = None,
           repos: Optional[str] = None,
           providers: Optional[str] = None,
           image_formats: Optional[str] = None,
           registry_root: Optional[Union[str, Path]] = None,
           acceptance_tag: Optional[str] = None,
           verification_tag: Optional[str] = None,
           config: Optional[ToolConfig] = None) -> OperationResult:
    """
    Convenience function to run a registry operation

    Lists are whitespace separated strings, as on the command line.

    Examples:
        # Record builds for two units
        manage("update", units="api web", commits="c1 c2",
               registry_root="appsettings/segment")

        # Summarise supplied build info
        result = manage("list", units="api web", commits="c1 c2")
        print(result.detail_message)
    """
    request = OperationRequest.from_strings(
        operation=operation,
        units=units,
        commits=commits,
        tags=tags,
        repos=repos,
        providers=providers,
        image_formats=image_formats,
        registry_root=registry_root,
        acceptance_tag=acceptance_tag,
        verification_tag=verification_tag,
    )
    return ReferenceManager(config).run(request)
