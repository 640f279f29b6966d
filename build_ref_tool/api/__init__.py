# build_ref_tool/api/__init__.py
"""API layer for build-ref-tool"""

from .exceptions import (
    BuildRefError,
    ArgumentError,
    ConfigError,
    UnknownFormatError,
    TagNotFoundError,
    TagMessageUnavailableError,
    ImageError,
    ImageUnavailableError,
    PullFailedError,
    AcceptFailedError,
)
from .manager import ReferenceManager, manage

__all__ = [
    # Main classes
    "ReferenceManager",

    # Convenience functions
    "manage",

    # Exceptions
    "BuildRefError",
    "ArgumentError",
    "ConfigError",
    "UnknownFormatError",
    "TagNotFoundError",
    "TagMessageUnavailableError",
    "ImageError",
    "ImageUnavailableError",
    "PullFailedError",
    "AcceptFailedError",
]
