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
Description: A fluent API for reflecting over the annotations applied to a class or a method.
            The properties method turns the single remaining annotation into its bound
            properties.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from collections.abc import Iterator
from typing import Self

from ..classes.annotations import Annotation
from ..typing.utilities import contains
from . import runtime
from .bound_properties import BoundAnnotationProperties
from .runtime import Method
from .throw import throw_unless


class BoundAnnotations:
    """A narrowing view over annotation instances.

    Filters narrow the view in place and return it for chaining. A view is not thread-safe.

    Examples:
        >>> BoundAnnotations.on(MyClass).named("Singleton", "Immutable").annotations()

        >>> BoundAnnotations.on(MyClass).matching(Threading).properties().named("model").value()
        'async'
    """

    def __init__(self, annotations: tuple[Annotation, ...]) -> None:
        self._annotations: list[Annotation] = list(annotations)

    @classmethod
    def on(cls, target: type | Method) -> Self:
        """Generates the annotations applied to a class, or the effective annotations of a method.

        Args:
            target (type | Method): The annotated class or method.

        Returns:
            Self: The annotations for chaining.
        """
        if isinstance(target, type):
            return cls(runtime.declared_annotations(target))
        return cls(runtime.annotations_of(target))

    @classmethod
    def effective(cls, target: type | Method) -> Self:
        """Generates the effective annotations of a class or a method. For a class, this includes
        the inherited annotation types applied to its bases.
        """
        return cls(runtime.annotations_of(target))

    def named(self, *names: str) -> Self:
        """Keeps the annotations whose type simple name is one of names."""
        self._annotations = [
            a
            for a in self._annotations
            if contains(names, runtime.simple_name(a.annotation_type()))
        ]
        return self

    def matching(self, *types: type[Annotation]) -> Self:
        """Keeps the annotations whose type is one of types."""
        self._annotations = [a for a in self._annotations if contains(types, a.annotation_type())]
        return self

    def exactly_one(self) -> Self:
        """Raises unless there is exactly one annotation.

        Raises:
            NoSuchPropertyError: Raised when there is not exactly one annotation.
        """
        throw_unless(len(self._annotations) == 1).no_such_property(
            f"Expected exactly one annotation. Found {len(self._annotations)}"
        )
        return self

    def annotation(self) -> Annotation:
        """Returns the single annotation.

        Raises:
            NoSuchPropertyError: Raised when there is not exactly one annotation.
        """
        return self.exactly_one()._annotations[0]

    def annotations(self) -> tuple[Annotation, ...]:
        return tuple(self._annotations)

    def properties(self) -> BoundAnnotationProperties:
        """Returns the properties of the single annotation, bound to it.

        Raises:
            NoSuchPropertyError: Raised when there is not exactly one annotation.
        """
        return BoundAnnotationProperties.of(self.annotation())

    def __iter__(self) -> Iterator[Annotation]:
        return iter(tuple(self._annotations))

    def __len__(self) -> int:
        return len(self._annotations)
