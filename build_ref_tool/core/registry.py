"""Build reference registry storage"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from .reference_codec import decode_reference, encode_reference
from .unit_resolver import DeploymentUnitResolver
from ..constants import BUILD_REFERENCE_GLOB
from ..models.reference import BuildReference, DeploymentUnitLocation


class BuildReferenceRegistry:
    """Read, write and discover build references under a registry root"""

    def __init__(self,
                 registry_root: Optional[Union[str, Path]] = None,
                 resolver: Optional[DeploymentUnitResolver] = None):
        self.resolver = resolver or DeploymentUnitResolver(registry_root)
        self.logger = logging.getLogger("BuildReferenceRegistry")

    @property
    def registry_root(self) -> Optional[Path]:
        """Get registry root directory"""
        return self.resolver.registry_root

    def ensure_root(self) -> None:
        """Create the registry root if one is in use"""
        if self.registry_root is not None:
            self.registry_root.mkdir(parents=True, exist_ok=True)

    def locate(self,
               unit: str,
               create_dirs: bool = True,
               follow_indirection: bool = True) -> DeploymentUnitLocation:
        """Resolve a unit, by default creating its directories"""
        return self.resolver.resolve(
            unit, create_dirs=create_dirs, follow_indirection=follow_indirection
        )

    def discover_units(self) -> List[str]:
        """Find every unit holding a record file

        Both structured and legacy records count. Units are returned
        sorted and once each.

        Returns:
            Unit names as found on disk
        """
        if self.registry_root is None or not self.registry_root.is_dir():
            return []

        units = set()
        for record_path in self.registry_root.rglob(BUILD_REFERENCE_GLOB):
            if record_path.is_file() and record_path.parent != self.registry_root:
                units.add(record_path.parent.name)

        discovered = sorted(units)
        self.logger.info(f"Discovered {len(discovered)} deployment unit(s) in {self.registry_root}")
        return discovered

    def read(self, location: DeploymentUnitLocation) -> Optional[BuildReference]:
        """Read a unit's record, structured file first then legacy

        Returns:
            Decoded reference or None when no record exists
        """
        path = location.read_path
        if path is None or not path.is_file():
            return None

        return decode_reference(path.read_text(encoding="utf-8"))

    def read_structured(self, location: DeploymentUnitLocation) -> Optional[BuildReference]:
        """Read a unit's structured record only"""
        path = location.record_path
        if path is None or not path.is_file():
            return None

        return decode_reference(path.read_text(encoding="utf-8"))

    def write(self, location: DeploymentUnitLocation, reference: BuildReference) -> Path:
        """Write a unit's structured record and remove its legacy record

        Args:
            location: Resolved unit location
            reference: Reference with a commit

        Returns:
            Path of the written record
        """
        if location.record_path is None:
            raise ValueError("Writing a build reference requires a registry root")

        content = encode_reference(reference)
        location.record_path.parent.mkdir(parents=True, exist_ok=True)
        location.record_path.write_text(content, encoding="utf-8")
        self.logger.info(f"Updated {location.record_path}")

        legacy = location.legacy_record_path
        if legacy is not None and legacy.exists():
            legacy.unlink()
            self.logger.info(f"Removed legacy build reference {legacy}")

        location.is_legacy = False
        return location.record_path
