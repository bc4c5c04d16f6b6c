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
Description: A fluent API for reflecting over the properties (aka values) of an annotation
            instance.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from collections.abc import Iterator
from typing import Any, Self

from ..classes.annotations import Annotation
from ..errors import NoSuchPropertyError, NoSuchValueError
from . import runtime


class BoundAnnotationProperty:
    """A single property of an annotation, bound to the annotation instance it is read from.

    It is usually created by another part of the fluent API, for example:
        >>> model = (
        ...     BoundAnnotations.on(Service).matching(Threading).properties().named("model")
        ... )
    """

    def __init__(self, annotation: Annotation, name: str) -> None:
        self._annotation = annotation
        self._name = name

    def type(self) -> Any:
        """Returns the declared type of the property."""
        return self._annotation.annotation_type().__property_types__[self._name]

    def name(self) -> str:
        return self._name

    def value(self) -> Any:
        """Returns the value of the property. The accessor is invoked on each call.

        Raises:
            NoSuchValueError: Raised when the accessor fails, chained to the accessor error.
        """
        try:
            return runtime.invoke_property(self._annotation, self._name)
        except Exception as e:
            raise NoSuchValueError(f"Value not retrievable for {self._name}") from e

    def __repr__(self) -> str:
        return f"<BoundAnnotationProperty {self._name} of {self._annotation!r}>"


class BoundAnnotationProperties:
    """The properties of an annotation instance, in declaration order."""

    def __init__(self, annotation: Annotation) -> None:
        self._annotation = annotation
        self._properties = tuple(
            BoundAnnotationProperty(annotation, name)
            for name in annotation.annotation_type().__properties__
        )

    @classmethod
    def of(cls, annotation: Annotation) -> Self:
        return cls(annotation)

    def named(self, name: str) -> BoundAnnotationProperty:
        """Fetches the property called name.

        Raises:
            NoSuchPropertyError: Raised when there is no property called name.
        """
        for prop in self._properties:
            if prop.name() == name:
                return prop
        raise NoSuchPropertyError(f"{name} was not found")

    def as_dict(self) -> dict[str, Any]:
        """Returns the values of all the properties by name.

        Raises:
            NoSuchValueError: Raised when a value cannot be retrieved.
        """
        return {prop.name(): prop.value() for prop in self._properties}

    def __iter__(self) -> Iterator[BoundAnnotationProperty]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)
