"""Operation request models"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from ..api.exceptions import ArgumentError
from ..constants import UNSET, ReferenceOperation, DEFAULT_REFERENCE_OPERATION


def _entry(values: List[str], index: int) -> Optional[str]:
    """Get a list entry, treating short lists and the unset marker as None"""
    if index >= len(values):
        return None
    value = values[index]
    if not value or value == UNSET:
        return None
    return value


def split_list(value: Optional[str]) -> List[str]:
    """Split a whitespace separated list argument"""
    if not value:
        return []
    return value.split()


@dataclass
class UnitRequest:
    """Inputs supplied for one deployment unit

    ``formats`` is the raw entry, still joined by format separators.
    """

    index: int
    unit: str
    commit: Optional[str] = None
    tag: Optional[str] = None
    repo: Optional[str] = None
    provider: Optional[str] = None
    formats: Optional[str] = None


@dataclass
class OperationRequest:
    """A single run against the build reference registry"""

    operation: ReferenceOperation = DEFAULT_REFERENCE_OPERATION
    units: List[str] = field(default_factory=list)
    commits: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    repos: List[str] = field(default_factory=list)
    providers: List[str] = field(default_factory=list)
    image_formats: List[str] = field(default_factory=list)
    registry_root: Optional[Path] = None
    acceptance_tag: Optional[str] = None
    verification_tag: Optional[str] = None

    def __post_init__(self):
        """Post-initialization processing"""
        if isinstance(self.registry_root, str):
            self.registry_root = Path(self.registry_root)

    def validate(self) -> None:
        """Check the preconditions of the selected operation

        Raises:
            ArgumentError: If a required input is missing
        """
        operation = self.operation
        if operation == ReferenceOperation.ACCEPT:
            required = {"deployment unit list": self.units, "acceptance tag": self.acceptance_tag}
        elif operation == ReferenceOperation.LIST:
            required = {"deployment unit list": self.units}
        elif operation == ReferenceOperation.LISTFULL:
            required = {"registry directory": self.registry_root}
        elif operation == ReferenceOperation.UPDATE:
            required = {"deployment unit list": self.units, "registry directory": self.registry_root}
        elif operation == ReferenceOperation.VERIFY:
            required = {"deployment unit list": self.units, "verification tag": self.verification_tag}
        else:
            raise ArgumentError(f'Invalid operation "{operation}"')

        missing = [name for name, value in required.items() if not value]
        if missing:
            raise ArgumentError(
                f"Insufficient arguments for {operation.value}: missing {', '.join(missing)}"
            )

    def unit_request(self, index: int, unit: Optional[str] = None) -> UnitRequest:
        """Get the inputs at a list position"""
        return UnitRequest(
            index=index,
            unit=unit if unit is not None else self.units[index],
            commit=_entry(self.commits, index),
            tag=_entry(self.tags, index),
            repo=_entry(self.repos, index),
            provider=_entry(self.providers, index),
            formats=_entry(self.image_formats, index),
        )

    @classmethod
    def from_strings(cls,
                     operation: Union[str, ReferenceOperation] = DEFAULT_REFERENCE_OPERATION,
                     units: Optional[str] = None,
                     commits: Optional[str] = None,
                     tags: Optional[str] = None,
                     repos: Optional[str] = None,
                     providers: Optional[str] = None,
                     image_formats: Optional[str] = None,
                     registry_root: Optional[Union[str, Path]] = None,
                     acceptance_tag: Optional[str] = None,
                     verification_tag: Optional[str] = None) -> 'OperationRequest':
        """Create from whitespace separated list strings"""
        if isinstance(operation, str):
            try:
                operation = ReferenceOperation(operation.lower())
            except ValueError:
                raise ArgumentError(f'Invalid operation "{operation}"')

        return cls(
            operation=operation,
            units=split_list(units),
            commits=split_list(commits),
            tags=split_list(tags),
            repos=split_list(repos),
            providers=split_list(providers),
            image_formats=split_list(image_formats),
            registry_root=Path(registry_root) if registry_root else None,
            acceptance_tag=acceptance_tag or None,
            verification_tag=verification_tag or None,
        )
