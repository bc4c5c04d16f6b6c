"""
Re-export exceptions module for cleaner imports.

This allows: from metareflect.exceptions import NoSuchPropertyError
Instead of: from metareflect.meta.errors import NoSuchPropertyError
"""

from .abstract.exceptions.traced_exceptions import TracedException, format_exception
from .meta.errors import (
    ReflectionError,
    NoSuchMethodError,
    ClassNotFoundError,
    NoSuchPropertyError,
    NoSuchValueError,
    AnnotationCompositionError,
    AnnotationInstantiationError,
    AnnotationModificationError,
)

__all__ = [
    "TracedException",
    "format_exception",
    "ReflectionError",
    "NoSuchMethodError",
    "ClassNotFoundError",
    "NoSuchPropertyError",
    "NoSuchValueError",
    "AnnotationCompositionError",
    "AnnotationInstantiationError",
    "AnnotationModificationError",
]
