"""Services for build-ref-tool"""

from .config_service import ConfigService

__all__ = [
    "ConfigService",
]
