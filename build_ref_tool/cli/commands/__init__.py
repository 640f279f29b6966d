# build_ref_tool/cli/commands/__init__.py
"""CLI commands"""

from . import manage
from . import show

__all__ = [
    "manage",
    "show",
]
