"""
MIT License

Copyright (c) 2025 Sébastien Gachoud

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.

-------------------------------------------------------------------------------

Author: Sébastien Gachoud
Created: 2026-10-17
Description: A fluent API for reflecting over the classes declared within a class.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from collections.abc import Iterator
from typing import Self

from ..classes.annotations import Annotation
from . import runtime
from .bound_annotations import BoundAnnotations
from .declared_properties import DeclaredAnnotationProperties
from .throw import throw_unless


class DeclaredClasses:
    """A narrowing view over the classes declared within a class.

    Filters narrow the view in place and return it for chaining. A view is not thread-safe.

    Examples:
        >>> (
        ...     DeclaredClasses.from_type(Service)
        ...     .named("OnEvent")
        ...     .annotation_properties()
        ...     .named("state")
        ...     .type()
        ... )
    """

    def __init__(self, classes: tuple[type, ...]) -> None:
        self._classes: list[type] = list(classes)

    @classmethod
    def from_type(cls, enclosing_type: type) -> Self:
        """Retrieves all the classes defined in the body of enclosing_type."""
        return cls(runtime.declared_classes(enclosing_type))

    def named(self, name: str) -> Self:
        """Narrows the classes to those whose simple name is name."""
        self._classes = [c for c in self._classes if runtime.simple_name(c) == name]
        return self

    def exactly_one(self) -> Self:
        """Raises unless there is exactly one class.

        Raises:
            ClassNotFoundError: Raised when there is not exactly one class.
        """
        throw_unless(len(self._classes) == 1).class_not_found(
            f"Expected exactly one class. Found {len(self._classes)}"
        )
        return self

    def type(self) -> type:
        """Returns the single class.

        Raises:
            ClassNotFoundError: Raised when there is not exactly one class.
        """
        return self.exactly_one()._classes[0]

    def types(self) -> tuple[type, ...]:
        return tuple(self._classes)

    def annotation_type(self) -> type[Annotation]:
        """Returns the single class, checked to be an annotation type.

        Raises:
            ClassNotFoundError: Raised when there is not exactly one class, or when the class is
                not an annotation type.
        """
        found = self.type()
        throw_unless(runtime.is_annotation_type(found)).class_not_found(
            f"{found.__qualname__} is not an annotation"
        )
        return found

    def annotation_properties(self) -> DeclaredAnnotationProperties:
        """Returns the properties declared by the single class, an annotation type.

        Raises:
            ClassNotFoundError: Raised when there is not exactly one class, or when the class is
                not an annotation type.
        """
        return DeclaredAnnotationProperties.from_type(self.annotation_type())

    def bound_annotations(self) -> BoundAnnotations:
        """Returns the annotations applied to the single class.

        Raises:
            ClassNotFoundError: Raised when there is not exactly one class.
        """
        return BoundAnnotations.on(self.type())

    def __iter__(self) -> Iterator[type]:
        return iter(tuple(self._classes))

    def __len__(self) -> int:
        return len(self._classes)
