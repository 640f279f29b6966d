# build_ref_tool/images/__init__.py
"""Image managers for build-ref-tool"""

from .base import ImageManager
from .script import ScriptImageManager
from .factory import ImageManagerFactory

__all__ = [
    'ImageManager',
    'ScriptImageManager',
    'ImageManagerFactory',
]
