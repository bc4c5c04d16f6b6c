"""Fluent reflection API for metareflect."""

from .declared_methods import DeclaredMethods
from .declared_classes import DeclaredClasses
from .bound_annotations import BoundAnnotations
from .bound_properties import BoundAnnotationProperty, BoundAnnotationProperties
from .declared_properties import DeclaredAnnotationProperty, DeclaredAnnotationProperties
from .throw import Thrower, guard, throw_if, throw_unless

__all__ = [
    # Fluent views
    "DeclaredMethods",
    "DeclaredClasses",
    "BoundAnnotations",
    "BoundAnnotationProperty",
    "BoundAnnotationProperties",
    "DeclaredAnnotationProperty",
    "DeclaredAnnotationProperties",
    # Conditional raising
    "Thrower",
    "guard",
    "throw_if",
    "throw_unless",
]
