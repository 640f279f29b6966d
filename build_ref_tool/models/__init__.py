# build_ref_tool/models/__init__.py
"""Data models for build-ref-tool"""

from .reference import BuildReference, DeploymentUnitLocation
from .config import GitProviderAttributes, ImageProviderConfig, ToolConfig
from .operation import OperationRequest, UnitRequest
from .result import OperationResult, UnitResult, UnitStatus

__all__ = [
    # Reference models
    "BuildReference",
    "DeploymentUnitLocation",

    # Config models
    "GitProviderAttributes",
    "ImageProviderConfig",
    "ToolConfig",

    # Request models
    "OperationRequest",
    "UnitRequest",

    # Result models
    "OperationResult",
    "UnitResult",
    "UnitStatus",
]
