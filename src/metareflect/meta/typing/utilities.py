"""Type and sequence utility functions.

This module provides helper functions shared by the annotation metamodel and the reflection
runtime: equality based membership, type hint resolution that tolerates unresolvable forward
references, and unwrapping of method descriptors.
"""
import inspect
import sys
from collections.abc import Iterable
from types import NoneType
from typing import Any, Callable, get_type_hints

type Annotation = Any


def contains[T](sequence: Iterable[T], item: T) -> bool:
    """Check if a sequence contains an item as determined by equality.

    Unlike the ``in`` operator, identity is not a shortcut: an element that is not equal to
    itself never matches.

    Args:
        sequence (Iterable[T]): The sequence to search.
        item (T): The item to match.

    Returns:
        bool: Whether any element of the sequence equals item.
    """
    return any(element == item for element in sequence)


def normalize_type(annotation: Annotation) -> Annotation:
    """Normalize an annotation the way typing.get_type_hints does. None becomes NoneType.

    Args:
        annotation (Any): The annotation to normalize.

    Returns:
        Any: The normalized annotation.
    """
    return NoneType if annotation is None else annotation


def unwrap_callable(member: Any) -> Any:
    """Get the function underlying a staticmethod or classmethod. Other objects are returned
    unchanged.

    Args:
        member (Any): A function, a staticmethod or a classmethod.

    Returns:
        Any: The underlying function.
    """
    if isinstance(member, (staticmethod, classmethod)):
        return member.__func__
    return member


def _evaluate(
    annotation: Annotation, globalns: dict[str, Any], localns: dict[str, Any]
) -> Annotation:
    """Evaluate a string annotation, keeping it raw when it cannot be resolved."""
    if not isinstance(annotation, str):
        return normalize_type(annotation)
    try:
        return normalize_type(eval(annotation, globalns, localns))  # noqa: S307
    except (NameError, AttributeError, SyntaxError, TypeError):
        return annotation


def resolve_type_hints(obj: Callable[..., Any] | type) -> dict[str, Annotation]:
    """Get the type hints of a function or a class. See typing.get_type_hints.

    When a hint cannot be resolved, each annotation is resolved on its own: the ones that
    cannot be evaluated are kept as their raw string, the others are still resolved.

    Args:
        obj (Callable[..., Any] | type): A function or a class.

    Returns:
        dict[str, Any]: A dictionary of type hints.
    """
    try:
        return get_type_hints(obj)
    except (NameError, AttributeError, SyntaxError, TypeError):
        pass

    hints: dict[str, Annotation] = {}
    if isinstance(obj, type):
        for owner in reversed(obj.__mro__):
            module = sys.modules.get(owner.__module__)
            globalns = dict(vars(module)) if module is not None else {}
            localns = dict(vars(owner))
            for key, raw in inspect.get_annotations(owner).items():
                hints[key] = _evaluate(raw, globalns, localns)
        return hints

    function = inspect.unwrap(obj)
    globalns = getattr(function, "__globals__", {})
    for key, raw in inspect.get_annotations(function).items():
        hints[key] = _evaluate(raw, globalns, {})
    return hints
