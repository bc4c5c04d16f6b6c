"""
Re-export reflection module for cleaner imports.

This allows: from metareflect.reflection import DeclaredMethods
Instead of: from metareflect.meta.reflection.declared_methods import DeclaredMethods
"""

from .meta.reflection import (
    DeclaredMethods,
    DeclaredClasses,
    BoundAnnotations,
    BoundAnnotationProperty,
    BoundAnnotationProperties,
    DeclaredAnnotationProperty,
    DeclaredAnnotationProperties,
    Thrower,
    guard,
    throw_if,
    throw_unless,
)

__all__ = [
    "DeclaredMethods",
    "DeclaredClasses",
    "BoundAnnotations",
    "BoundAnnotationProperty",
    "BoundAnnotationProperties",
    "DeclaredAnnotationProperty",
    "DeclaredAnnotationProperties",
    "Thrower",
    "guard",
    "throw_if",
    "throw_unless",
]
