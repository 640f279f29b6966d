"""Configuration data models"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Any

from ..constants import DEFAULT_IMAGE_FORMAT_SEPARATORS, ImageFormat


@dataclass
class GitProviderAttributes:
    """Connection attributes of a git hosting provider"""

    name: str
    dns: Optional[str] = None
    api_dns: Optional[str] = None
    org: Optional[str] = None
    credentials_var: Optional[str] = None

    def is_complete(self) -> bool:
        """Check that the attributes needed for tag resolution are present"""
        return all([self.dns, self.api_dns, self.org])

    def clone_url(self, repo: str, credentials: Optional[str] = None) -> str:
        """Build the https clone url of a repo hosted by this provider"""
        auth = f"{credentials}@" if credentials else ""
        return f"https://{auth}{self.dns}/{self.org}/{repo}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {}
        if self.dns:
            data["dns"] = self.dns
        if self.api_dns:
            data["api_dns"] = self.api_dns
        if self.org:
            data["org"] = self.org
        if self.credentials_var:
            data["credentials_var"] = self.credentials_var
        return data

    @classmethod
    def from_dict(cls, name: str, data: Dict[str, Any]) -> 'GitProviderAttributes':
        """Create from dictionary"""
        return cls(
            name=name.upper(),
            dns=data.get("dns"),
            api_dns=data.get("api_dns"),
            org=data.get("org"),
            credentials_var=data.get("credentials_var"),
        )


@dataclass
class ImageProviderConfig:
    """Where images of one format live"""

    image_format: ImageFormat
    provider: Optional[str] = None
    from_provider: Optional[str] = None

    @property
    def can_pull(self) -> bool:
        """Check if a fallback provider is configured"""
        return bool(self.from_provider)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {}
        if self.provider:
            data["provider"] = self.provider
        if self.from_provider:
            data["from_provider"] = self.from_provider
        return data

    @classmethod
    def from_dict(cls, image_format: ImageFormat, data: Dict[str, Any]) -> 'ImageProviderConfig':
        """Create from dictionary"""
        return cls(
            image_format=image_format,
            provider=data.get("provider"),
            from_provider=data.get("from_provider"),
        )


@dataclass
class ToolConfig:
    """Settings threaded through the registry components"""

    automation_dir: Optional[Path] = None
    automation_data_dir: Optional[Path] = None
    image_format_separators: str = DEFAULT_IMAGE_FORMAT_SEPARATORS
    image_providers: Dict[ImageFormat, ImageProviderConfig] = field(default_factory=dict)
    git_providers: Dict[str, GitProviderAttributes] = field(default_factory=dict)
    credentials: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        """Post-initialization processing"""
        if isinstance(self.automation_dir, str):
            self.automation_dir = Path(self.automation_dir)
        if isinstance(self.automation_data_dir, str):
            self.automation_data_dir = Path(self.automation_data_dir)
        if not self.image_format_separators:
            self.image_format_separators = DEFAULT_IMAGE_FORMAT_SEPARATORS

    @property
    def primary_separator(self) -> str:
        """Separator used when joining formats into one list entry"""
        return self.image_format_separators[0]

    def split_formats(self, value: Optional[str]) -> List[str]:
        """Split one formats entry on any of the configured separators"""
        if not value:
            return []
        parts = [value]
        for separator in self.image_format_separators:
            parts = [piece for part in parts for piece in part.split(separator)]
        return [part for part in parts if part]

    def join_formats(self, formats: List[str]) -> str:
        """Join formats into one list entry"""
        return self.primary_separator.join(formats)

    def get_image_provider(self, image_format: ImageFormat) -> ImageProviderConfig:
        """Get provider settings for a format (empty if not configured)"""
        return self.image_providers.get(image_format, ImageProviderConfig(image_format))

    def get_git_provider(self, name: str) -> Optional[GitProviderAttributes]:
        """Get git provider attributes by (case-insensitive) id"""
        return self.git_providers.get(name.upper())

    def get_credentials(self, provider: GitProviderAttributes) -> Optional[str]:
        """Get the credential value a provider refers to"""
        if not provider.credentials_var:
            return None
        return self.credentials.get(provider.credentials_var)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "automation_dir": str(self.automation_dir) if self.automation_dir else None,
            "automation_data_dir": str(self.automation_data_dir) if self.automation_data_dir else None,
            "image_format_separators": self.image_format_separators,
            "image_providers": {
                fmt.value: provider.to_dict()
                for fmt, provider in self.image_providers.items()
            },
            "git_providers": {
                name: provider.to_dict()
                for name, provider in self.git_providers.items()
            },
        }
