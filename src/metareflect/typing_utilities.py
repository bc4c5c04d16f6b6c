"""
Re-export utilities module for cleaner imports.

This allows: from metareflect.typing_utilities import contains
Instead of: from metareflect.meta.typing.utilities import contains
"""

from .meta.typing.utilities import (
    contains,
    normalize_type,
    resolve_type_hints,
    unwrap_callable,
)

__all__ = [
    "contains",
    "normalize_type",
    "resolve_type_hints",
    "unwrap_callable",
]
