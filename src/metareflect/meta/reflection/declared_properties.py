"""A fluent API for reflecting over the properties declared by an annotation type. Declared
properties only describe the name and type of a property, use BoundAnnotationProperties to
read values from an annotation instance.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Self

from ..classes.annotations import Annotation
from ..errors import NoSuchPropertyError
from .throw import throw_unless


class DeclaredAnnotationProperty:
    def __init__(self, annotation_type: type[Annotation], name: str) -> None:
        self._annotation_type = annotation_type
        self._name = name

    @classmethod
    def of(cls, annotation_type: type[Annotation], name: str) -> Self:
        return cls(annotation_type, name)

    def type(self) -> Any:
        return self._annotation_type.__property_types__[self._name]

    def name(self) -> str:
        return self._name

    def default(self) -> Any:
        """Returns the default value of the property.

        Raises:
            NoSuchValueError: Raised when the property is required or computed.
        """
        defaults = self._annotation_type.__property_defaults__
        throw_unless(self._name in defaults).no_such_value(
            f"Property {self._name} of {self._annotation_type.__name__} has no default value"
        )
        return defaults[self._name]

    def __repr__(self) -> str:
        return f"<DeclaredAnnotationProperty {self._annotation_type.__name__}.{self._name}>"


class DeclaredAnnotationProperties:
    """The properties declared by an annotation type, its annotation bases included."""

    def __init__(self, annotation_type: type[Annotation]) -> None:
        self._annotation_type = annotation_type
        self._properties = tuple(
            DeclaredAnnotationProperty.of(annotation_type, name)
            for name in annotation_type.__properties__
        )

    @classmethod
    def from_type(cls, annotation_type: type[Annotation]) -> Self:
        return cls(annotation_type)

    def named(self, name: str) -> DeclaredAnnotationProperty:
        """Fetches the property identified by name.

        Raises:
            NoSuchPropertyError: Raised when the name was not found.
        """
        for prop in self._properties:
            if prop.name() == name:
                return prop
        raise NoSuchPropertyError(f"{name} property not found")

    def __iter__(self) -> Iterator[DeclaredAnnotationProperty]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)
