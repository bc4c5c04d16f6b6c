"""
Re-export annotations module for cleaner imports.

This allows: from metareflect.annotations import Annotation
Instead of: from metareflect.meta.classes.annotations import Annotation
"""

from .meta.classes.annotations import Annotation, AnnotationMeta

__all__ = [
    "Annotation",
    "AnnotationMeta",
]
