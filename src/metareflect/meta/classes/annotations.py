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
Description: This module provides annotations: typed, immutable metadata that can be attached
            to classes and methods with the decorator syntax.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import inspect
from typing import Any, ClassVar, get_origin

from ..errors import (
    AnnotationCompositionError,
    AnnotationInstantiationError,
    AnnotationModificationError,
)
from ..typing.utilities import resolve_type_hints, unwrap_callable

# Name of the attribute holding the annotations applied to a class or a function.
ANNOTATIONS_ATTRIBUTE = "__metareflect_annotations__"

_MISSING: Any = object()


def _verify_functions(name: str, namespace: dict[str, Any]) -> None:
    """Verify that no disallowed function is added.
    Disallowed functions are __new__ and __init__.

    Args:
        name (str): name of the class.
        namespace (dict[str, Any]): namespace of the class.

    Raises:
        AnnotationCompositionError: Raised when a disallowed function is added.
    """
    if "__init__" in namespace or "__new__" in namespace:
        raise AnnotationCompositionError(
            f"Annotation type '{name}' is disallowed to have __new__ or __init__"
            " method since its properties are set from the decorator arguments."
        )


def _is_class_var(hint: Any) -> bool:
    if isinstance(hint, str):
        # Unresolved hint, recognized by its spelling.
        return hint.partition("[")[0].strip() in ("ClassVar", "typing.ClassVar")
    return hint is ClassVar or get_origin(hint) is ClassVar


def _collect_data_properties(
    cls: type, namespace: dict[str, Any], reserved: set[str]
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Collect the data properties of an annotation type, those of the annotation bases first.

    Returns:
        tuple[dict[str, Any], dict[str, Any]]: The types and the defaults of the data properties.
    """
    types: dict[str, Any] = {}
    defaults: dict[str, Any] = {}
    for base in reversed(cls.__mro__[1:]):
        if isinstance(base, AnnotationMeta):
            types.update((k, base.__property_types__[k]) for k in base.__data_properties__)
            defaults.update(base.__property_defaults__)

    hints = resolve_type_hints(cls)
    for key, raw in inspect.get_annotations(cls).items():
        hint = hints.get(key, raw)
        if key.startswith("_") or _is_class_var(hint):
            continue
        if key in reserved:
            raise AnnotationCompositionError(
                f"Property '{key}' of annotation type '{cls.__name__}' shadows an"
                " Annotation attribute."
            )
        types[key] = hint
        if key in namespace:
            defaults[key] = namespace[key]
    return types, defaults


def _collect_computed_properties(cls: type, namespace: dict[str, Any]) -> dict[str, Any]:
    """Collect the public properties having a return annotation, those of the bases first."""
    types: dict[str, Any] = {}
    for base in reversed(cls.__mro__[1:]):
        if isinstance(base, AnnotationMeta):
            types.update((k, base.__property_types__[k]) for k in base.__computed_properties__)

    for key, member in namespace.items():
        if key.startswith("_") or not isinstance(member, property) or member.fget is None:
            continue
        hints = resolve_type_hints(member.fget)
        if "return" in hints:
            types[key] = hints["return"]
    return types


class AnnotationMeta(type):
    """Metaclass of annotation types. It gathers the properties of the type for introspection.

    Class keywords:
        inherited (bool): Whether an annotation of this type applied to a class is visible on
            its subclasses through the effective annotations. Defaults to False.
        repeatable (bool): Whether an annotation of this type can be applied more than once to
            the same target. Defaults to False.
    """

    __properties__: tuple[str, ...]
    __data_properties__: tuple[str, ...]
    __computed_properties__: tuple[str, ...]
    __property_types__: dict[str, Any]
    __property_defaults__: dict[str, Any]
    __inherited__: bool
    __repeatable__: bool

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        /,
        inherited: bool = False,
        repeatable: bool = False,
        **kwargs: Any,
    ) -> Any:
        is_root = not any(isinstance(base, AnnotationMeta) for base in bases)
        if not is_root:
            _verify_functions(name, namespace)

        cls = super().__new__(mcs, name, bases, namespace, **kwargs)
        cls.__inherited__ = inherited
        cls.__repeatable__ = repeatable

        if is_root:
            data_types: dict[str, Any] = {}
            defaults: dict[str, Any] = {}
            computed_types: dict[str, Any] = {}
        else:
            reserved = {k for k in dir(Annotation) if not k.startswith("_")}
            data_types, defaults = _collect_data_properties(cls, namespace, reserved)
            computed_types = {
                k: v
                for k, v in _collect_computed_properties(cls, namespace).items()
                if k not in data_types
            }

        cls.__data_properties__ = tuple(data_types)
        cls.__computed_properties__ = tuple(computed_types)
        cls.__properties__ = cls.__data_properties__ + cls.__computed_properties__
        cls.__property_types__ = data_types | computed_types
        cls.__property_defaults__ = defaults
        return cls


def _annotations_on(holder: Any) -> tuple["Annotation", ...]:
    if isinstance(holder, type):
        return vars(holder).get(ANNOTATIONS_ATTRIBUTE, ())
    return getattr(holder, ANNOTATIONS_ATTRIBUTE, ())


class Annotation(metaclass=AnnotationMeta):
    """Base class to create annotation types. An annotation instance is applied with the
    decorator syntax to a class, a function, a staticmethod or a classmethod.

    Examples:
        >>> class Threading(Annotation):
        ...     model: str  # a required property.
        ...     pool_size: int = 4  # a property with a default.
        ...     _hidden: int = 0  # not a property.

        >>> @Threading(model="async")
        ... class Service:
        ...     pass

        >>> Threading(model="async").pool_size
        4

        >>> Threading(model="async").model = "sync"  # raises AnnotationModificationError.

        >>> Threading()  # raises AnnotationInstantiationError, model is required.
    """

    __properties__: ClassVar[tuple[str, ...]]

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        cls = type(self)
        if cls is Annotation:
            raise AnnotationInstantiationError(
                "Cannot instantiate 'Annotation' itself. Subclass it to create an annotation type."
            )
        if args:
            if len(args) > 1 or "value" not in cls.__data_properties__ or "value" in kwargs:
                raise AnnotationInstantiationError(
                    f"Annotation '{cls.__name__}' accepts a single positional argument only when"
                    " it declares a 'value' property."
                )
            kwargs["value"] = args[0]

        unknown = [k for k in kwargs if k not in cls.__data_properties__]
        if unknown:
            raise AnnotationInstantiationError(
                f"Annotation '{cls.__name__}' has no settable properties {unknown}."
            )

        missing = []
        for key in cls.__data_properties__:
            value = kwargs.get(key, cls.__property_defaults__.get(key, _MISSING))
            if value is _MISSING:
                missing.append(key)
                continue
            object.__setattr__(self, key, value)
        if missing:
            raise AnnotationInstantiationError(
                f"Annotation '{cls.__name__}' needs a value for properties {missing}."
            )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AnnotationModificationError(
            f"Attribute '{name}' of annotation '{type(self).__name__}' cannot be modified."
            " Reason: annotations are immutable."
        )

    def __delattr__(self, name: str) -> None:
        raise AnnotationModificationError(
            f"Attribute '{name}' of annotation '{type(self).__name__}' cannot be deleted."
            " Reason: annotations are immutable."
        )

    def __call__[T](self, target: T) -> T:
        """Apply the annotation to target and return target unchanged.

        Args:
            target (T): A class, a function, a staticmethod or a classmethod.

        Raises:
            AnnotationCompositionError: Raised when target cannot be annotated, or when a
                non-repeatable annotation type is applied twice.

        Returns:
            T: target.
        """
        holder = unwrap_callable(target)
        if not (isinstance(holder, type) or inspect.isfunction(holder)):
            raise AnnotationCompositionError(
                f"Cannot apply annotation '{type(self).__name__}' to {target!r}. Only classes"
                " and functions can be annotated."
            )

        current = _annotations_on(holder)
        if not type(self).__repeatable__ and any(type(a) is type(self) for a in current):
            raise AnnotationCompositionError(
                f"Annotation '{type(self).__name__}' is not repeatable and is already applied"
                f" to {holder.__qualname__}."
            )
        # Decorators apply bottom-up, prepending keeps the source order.
        setattr(holder, ANNOTATIONS_ATTRIBUTE, (self,) + current)
        return target

    def annotation_type(self) -> type["Annotation"]:
        """Returns the annotation type of this annotation."""
        return type(self)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(
            getattr(self, k) == getattr(other, k) for k in type(self).__data_properties__
        )

    def __hash__(self) -> int:
        return hash((type(self), type(self).__data_properties__))

    def __repr__(self) -> str:
        values = ", ".join(f"{k}={getattr(self, k)!r}" for k in type(self).__data_properties__)
        return f"@{type(self).__qualname__}({values})"
