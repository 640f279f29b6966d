"""Build Ref Tool - Registry of the builds behind each deployment unit.

This tool records which commit and tag each deployment unit was last built
from and in which image formats, and checks those builds before they are
promoted or deployed.
"""

from .__version__ import __version__, __version_info__, __author__, __email__, __license__

# Exceptions
from .api.exceptions import (
    BuildRefError,
    ArgumentError,
    ConfigError,
    UnknownFormatError,
    TagNotFoundError,
    TagMessageUnavailableError,
    ImageUnavailableError,
    PullFailedError,
    AcceptFailedError,
)

# Core API
from .api.manager import ReferenceManager, manage

# Data models
from .constants import ImageFormat, ReferenceOperation
from .models import BuildReference, OperationRequest, OperationResult, ToolConfig

# Utility functions
from .core import decode_reference, encode_reference

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__email__",
    "__license__",

    # Main classes
    "ReferenceManager",

    # Core API functions
    "manage",
    "decode_reference",
    "encode_reference",

    # Data models
    "BuildReference",
    "OperationRequest",
    "OperationResult",
    "ToolConfig",
    "ImageFormat",
    "ReferenceOperation",

    # Exceptions
    "BuildRefError",
    "ArgumentError",
    "ConfigError",
    "UnknownFormatError",
    "TagNotFoundError",
    "TagMessageUnavailableError",
    "ImageUnavailableError",
    "PullFailedError",
    "AcceptFailedError",
]
