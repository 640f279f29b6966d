"""CLI utility functions"""

from .output import (
    format_operation_result,
    format_context,
    print_error,
)

__all__ = [
    'format_operation_result',
    'format_context',
    'print_error',
]
