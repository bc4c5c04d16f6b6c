"""Errors raised by the fluent reflection API and the annotation metamodel.

Lookup failures (method, class, property) are also ``LookupError`` so that callers may catch
them generically. Value retrieval failures are always chained to the error raised by the
property accessor.
"""

from ..abstract.exceptions.traced_exceptions import TracedException


class ReflectionError(TracedException):
    """Base class of every error raised by metareflect."""


class NoSuchMethodError(ReflectionError, LookupError):
    """Signals that a set of methods does not satisfy a cardinality constraint."""


class ClassNotFoundError(ReflectionError, LookupError):
    """Signals that a set of classes does not satisfy a cardinality constraint, or that the
    resolved class is not an annotation type."""


class NoSuchPropertyError(ReflectionError, LookupError):
    """Signals a missing annotation property, or a set of annotations with the wrong count."""


class NoSuchValueError(ReflectionError):
    """Signals that the value of an annotation property could not be retrieved."""


class AnnotationCompositionError(ReflectionError):
    """Composition error of an annotation type, or misuse of an annotation on a target."""


class AnnotationInstantiationError(ReflectionError):
    """Instantiation error of an annotation."""


class AnnotationModificationError(ReflectionError, AttributeError):
    """Modification error of an annotation instance."""
