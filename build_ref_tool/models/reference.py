"""Build reference data models"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Any

from ..constants import DEFAULT_IMAGE_FORMAT, SHORT_COMMIT_LENGTH


def _lookup(data: Dict[str, Any], name: str) -> Any:
    """Get an attribute trying lower-case then capitalized key

    The first non-null value wins; missing keys give None.
    """
    for key in (name.lower(), name.capitalize()):
        value = data.get(key)
        if value is not None:
            return value
    return None


def _as_text(value: Any) -> Optional[str]:
    """Convert a scalar attribute to text, mapping empty values to None"""
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


@dataclass
class BuildReference:
    """Persisted build information for one deployment unit

    A None field is unset. ``formats`` is kept as read, so an empty
    list survives a decode.
    """

    commit: Optional[str] = None
    tag: Optional[str] = None
    formats: Optional[List[str]] = None

    @property
    def is_empty(self) -> bool:
        """True when the reference carries neither commit nor tag"""
        return self.commit is None and self.tag is None

    @property
    def short_commit(self) -> Optional[str]:
        """Get abbreviated commit hash"""
        if self.commit is None:
            return None
        return self.commit[:SHORT_COMMIT_LENGTH]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the canonical structured form

        Raises:
            ValueError: If the commit is unset
        """
        if self.commit is None:
            raise ValueError("A build reference requires a commit")

        data: Dict[str, Any] = {"Commit": self.commit.lower()}
        if self.tag is not None:
            data["Tag"] = self.tag

        formats = self.formats
        if formats is None:
            formats = [DEFAULT_IMAGE_FORMAT.value]
        data["Formats"] = [f.lower() for f in formats]

        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BuildReference':
        """Create from a structured record

        Attribute names match in either capitalization and missing
        attributes stay unset.
        """
        formats = None
        raw_formats = _lookup(data, "formats")
        if isinstance(raw_formats, list):
            formats = [str(f) for f in raw_formats if f is not None]
        elif raw_formats is not None:
            formats = [str(raw_formats)]

        if formats is None:
            single_format = _as_text(_lookup(data, "format"))
            if single_format is not None:
                formats = [single_format]

        return cls(
            commit=_as_text(_lookup(data, "commit")),
            tag=_as_text(_lookup(data, "tag")),
            formats=formats,
        )


@dataclass
class DeploymentUnitLocation:
    """Where the record for a nominal deployment unit lives

    Paths are None when no registry root is in use.
    """

    nominal: str
    effective: str
    record_path: Optional[Path] = None
    legacy_record_path: Optional[Path] = None
    is_legacy: bool = False

    @property
    def is_indirected(self) -> bool:
        """True when the unit refers to another unit's record"""
        return self.effective != self.nominal

    @property
    def read_path(self) -> Optional[Path]:
        """Path to read the record from (structured file, else legacy)"""
        if self.is_legacy:
            return self.legacy_record_path
        return self.record_path
