"""Deployment unit resolution within a registry directory"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..constants import (
    BUILD_REFERENCE_FILE,
    LEGACY_BUILD_REFERENCE_FILE,
    INDIRECTION_FILES,
)
from ..models.reference import DeploymentUnitLocation


class DeploymentUnitResolver:
    """Resolves nominal deployment units to the unit holding their record"""

    def __init__(self, registry_root: Optional[Union[str, Path]] = None):
        """Initialize unit resolver

        Args:
            registry_root: Directory with one subdirectory per unit. Without
                one, units resolve to themselves and have no record paths.
        """
        self.registry_root = Path(registry_root) if registry_root else None
        self.logger = logging.getLogger("DeploymentUnitResolver")

    def get_unit_dir(self, unit: str) -> Path:
        """Get the registry directory of a unit"""
        return self.registry_root / unit

    def get_record_path(self, unit: str) -> Path:
        """Get the structured record path of a unit"""
        return self.get_unit_dir(unit) / BUILD_REFERENCE_FILE

    def get_legacy_record_path(self, unit: str) -> Path:
        """Get the legacy record path of a unit"""
        return self.get_unit_dir(unit) / LEGACY_BUILD_REFERENCE_FILE

    def find_effective_unit(self, nominal: str) -> str:
        """Follow the first indirection file present in the unit's directory

        Args:
            nominal: Unit name as supplied

        Returns:
            Name of the unit whose record is authoritative
        """
        if self.registry_root is None:
            return nominal

        unit_dir = self.get_unit_dir(nominal)
        for ref_file in INDIRECTION_FILES:
            ref_path = unit_dir / ref_file
            if ref_path.is_file():
                effective = ref_path.read_text(encoding="utf-8").strip()
                if effective:
                    self.logger.debug(f"{nominal} refers to {effective} via {ref_file}")
                    return effective
                break

        return nominal

    def resolve(self,
                nominal: str,
                create_dirs: bool = True,
                follow_indirection: bool = True) -> DeploymentUnitLocation:
        """Resolve a nominal unit to its effective unit and record location

        Args:
            nominal: Unit name as supplied
            create_dirs: Create the nominal and effective unit directories
            follow_indirection: Consult the unit's indirection files

        Returns:
            Location of the unit's record
        """
        effective = self.find_effective_unit(nominal) if follow_indirection else nominal

        if self.registry_root is None:
            return DeploymentUnitLocation(nominal=nominal, effective=effective)

        record_path = self.get_record_path(effective)
        legacy_record_path = self.get_legacy_record_path(effective)

        if create_dirs:
            self.get_unit_dir(nominal).mkdir(parents=True, exist_ok=True)
            self.get_unit_dir(effective).mkdir(parents=True, exist_ok=True)

        return DeploymentUnitLocation(
            nominal=nominal,
            effective=effective,
            record_path=record_path,
            legacy_record_path=legacy_record_path,
            is_legacy=not record_path.is_file(),
        )
