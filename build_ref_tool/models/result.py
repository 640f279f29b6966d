"""Operation result models"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Any

from ..constants import UNSET, ReferenceOperation, SHORT_COMMIT_LENGTH


class UnitStatus(Enum):
    """Outcome for one deployment unit"""
    LISTED = "listed"
    ACCEPTED = "accepted"
    UPDATED = "updated"
    VERIFIED = "verified"
    SKIPPED = "skipped"


@dataclass
class UnitResult:
    """Result for one deployment unit, in list order"""

    unit: str
    commit: Optional[str] = None
    tag: Optional[str] = None
    formats: Optional[str] = None
    effective_unit: Optional[str] = None
    status: UnitStatus = UnitStatus.SKIPPED
    message: str = ""

    @property
    def is_indirected(self) -> bool:
        """True when the unit's record lives under another unit"""
        return self.effective_unit is not None and self.effective_unit != self.unit

    @property
    def short_commit(self) -> Optional[str]:
        """Get abbreviated commit hash"""
        if self.commit is None:
            return None
        return self.commit[:SHORT_COMMIT_LENGTH]

    def detail_clause(self) -> str:
        """Format the summary clause for this unit

        Gives ``", unit=[formats:]value"`` where value is the tag
        (followed by the short commit when known) or else the short
        commit. Empty when neither commit nor tag is known.
        """
        if self.commit is None and self.tag is None:
            return ""

        clause = f", {self.unit.lower()}="
        if self.formats is not None:
            clause += f"{self.formats.lower()}:"
        if self.tag is not None:
            clause += self.tag
            if self.commit is not None:
                clause += f" ({self.commit.lower()[:SHORT_COMMIT_LENGTH]})"
        else:
            clause += self.commit.lower()[:SHORT_COMMIT_LENGTH]
        return clause

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "unit": self.unit,
            "effective_unit": self.effective_unit,
            "commit": self.commit,
            "tag": self.tag,
            "formats": self.formats,
            "status": self.status.value,
            "message": self.message,
        }


@dataclass
class OperationResult:
    """Aggregate result of one registry run"""

    operation: ReferenceOperation
    units: List[UnitResult] = field(default_factory=list)
    detail_message: str = ""
    context: Dict[str, str] = field(default_factory=dict)
    start_time: datetime = field(default_factory=datetime.utcnow)
    end_time: Optional[datetime] = None

    @property
    def duration(self) -> Optional[float]:
        """Get operation duration in seconds"""
        if self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return None

    @property
    def unit_names(self) -> List[str]:
        """Get processed units in order"""
        return [result.unit for result in self.units]

    def add_unit(self, result: UnitResult) -> UnitResult:
        """Append a unit result"""
        self.units.append(result)
        return result

    def update_detail(self, result: UnitResult) -> None:
        """Append the unit's clause to the detail message"""
        self.detail_message += result.detail_clause()

    def values(self, attribute: str) -> List[str]:
        """Get one field of every unit, unset values as the unset marker"""
        values = []
        for result in self.units:
            value = getattr(result, attribute)
            values.append(value if value is not None else UNSET)
        return values

    def complete(self) -> None:
        """Mark operation as complete"""
        self.end_time = datetime.utcnow()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "operation": self.operation.value,
            "units": [result.to_dict() for result in self.units],
            "detail_message": self.detail_message,
            "context": self.context,
            "duration": self.duration,
        }
