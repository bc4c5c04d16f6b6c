"""Primitive reflective queries over Python classes, methods and annotations.

The fluent API only talks to the interpreter through this module. A *method* is a member found
in a class body: a function, a staticmethod or a classmethod. Attributes such as annotations
and the accessibility flag are stored on the underlying function, so every wrapper of the same
function observes the same state.
"""
import inspect
from typing import Any

from ..classes.annotations import ANNOTATIONS_ATTRIBUTE, Annotation, AnnotationMeta
from ..typing.utilities import resolve_type_hints, unwrap_callable

type Method = Any

# Name of the attribute holding the accessibility flag of a function.
ACCESSIBLE_ATTRIBUTE = "__metareflect_accessible__"

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def is_method(member: Any) -> bool:
    """Check if a class body member is a method."""
    return isinstance(member, (staticmethod, classmethod)) or inspect.isfunction(member)


def declared_classes(cls: type) -> tuple[type, ...]:
    """Get the classes defined in the body of cls, in definition order. Aliases to classes
    defined elsewhere are excluded.
    """
    classes: list[type] = []
    for member in vars(cls).values():
        if (
            isinstance(member, type)
            and member.__qualname__ == f"{cls.__qualname__}.{member.__name__}"
            and member not in classes
        ):
            classes.append(member)
    return tuple(classes)


def declared_methods(cls: type) -> tuple[Method, ...]:
    """Get the methods defined in the body of cls, in definition order. Inherited methods are
    excluded.
    """
    return tuple(member for member in vars(cls).values() if is_method(member))


def declared_annotations(target: type | Method) -> tuple[Annotation, ...]:
    """Get the annotations applied directly to a class or a method."""
    holder = unwrap_callable(target)
    if isinstance(holder, type):
        return tuple(vars(holder).get(ANNOTATIONS_ATTRIBUTE, ()))
    return tuple(getattr(holder, ANNOTATIONS_ATTRIBUTE, ()))


def annotations_of(target: type | Method) -> tuple[Annotation, ...]:
    """Get the effective annotations of a class or a method.

    For a class, annotations of inherited annotation types applied to its bases are added,
    unless the class, or a closer base, already carries an annotation of the same type.
    For a method, the effective annotations are the declared ones.
    """
    holder = unwrap_callable(target)
    if not isinstance(holder, type):
        return declared_annotations(holder)

    result = list(declared_annotations(holder))
    seen = {type(a) for a in result}
    for base in holder.__mro__[1:]:
        found = [
            a
            for a in declared_annotations(base)
            if type(a).__inherited__ and type(a) not in seen
        ]
        seen.update(type(a) for a in found)
        result.extend(found)
    return tuple(result)


def is_annotation_present(method: Method, annotation_type: type[Annotation]) -> bool:
    """Check if an annotation of exactly annotation_type is present on a method."""
    return any(type(a) is annotation_type for a in annotations_of(method))


def method_name(method: Method) -> str:
    return unwrap_callable(method).__name__


def return_type(method: Method) -> Any:
    """Get the return type of a method. Unannotated methods return Any."""
    return resolve_type_hints(unwrap_callable(method)).get("return", Any)


def parameter_types(method: Method) -> tuple[Any, ...]:
    """Get the types of the parameters of a method in signature order.

    The implicit first parameter (self or cls) is excluded, except for staticmethods.
    Unannotated parameters are typed Any.
    """
    function = unwrap_callable(method)
    hints = resolve_type_hints(function)
    parameters = list(inspect.signature(function).parameters.values())
    if not isinstance(method, staticmethod) and parameters and parameters[0].kind in _POSITIONAL:
        parameters = parameters[1:]
    return tuple(hints.get(p.name, Any) for p in parameters)


def simple_name(cls: type) -> str:
    return cls.__name__


def is_annotation_type(cls: type) -> bool:
    """Check if a class is an annotation type. Annotation itself is not one."""
    return isinstance(cls, AnnotationMeta) and cls is not Annotation


def invoke_property(annotation: Annotation, name: str) -> Any:
    """Invoke the accessor of the property name on an annotation. Errors raised by the
    accessor propagate.
    """
    return getattr(annotation, name)


def is_accessible(method: Method) -> bool:
    """Check the accessibility flag of a method.

    Unless set explicitly, private methods (a single leading underscore) are not accessible.
    """
    function = unwrap_callable(method)
    name = function.__name__
    default = not name.startswith("_") or (name.startswith("__") and name.endswith("__"))
    return getattr(function, ACCESSIBLE_ATTRIBUTE, default)


def set_accessible(method: Method, flag: bool) -> None:
    """Set the accessibility flag of a method. The flag is shared by every observer of the
    underlying function.
    """
    setattr(unwrap_callable(method), ACCESSIBLE_ATTRIBUTE, bool(flag))
