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
Description: A fluent API for reflecting over the methods declared within a class.
🦙
"""

from __future__ import annotations

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from collections.abc import Callable, Iterator
from typing import Any, Self

from ..classes.annotations import Annotation
from ..typing.utilities import contains, normalize_type
from . import runtime
from .runtime import Method
from .throw import throw_unless


class DeclaredMethods:
    """A narrowing view over the methods declared within a class.

    Filters narrow the view in place and return it for chaining. A view is not thread-safe,
    concurrent narrowing of the same instance must be synchronized by the caller.

    Examples:
        >>> handlers = (
        ...     DeclaredMethods.from_type(RestService)
        ...     .annotated_with(OnEvent)
        ...     .set_accessible(True)
        ...     .methods()
        ... )

        >>> DeclaredMethods.from_type(RestService).named("get").with_parameter_types(str).method()
    """

    def __init__(self, methods: tuple[Method, ...]) -> None:
        self._methods: list[Method] = list(methods)

    @classmethod
    def from_type(cls, type_: type) -> Self:
        """Fetches all of the methods declared on a class, inherited ones excluded.

        Args:
            type_ (type): The enclosing class.

        Returns:
            Self: The methods for chaining.
        """
        return cls(runtime.declared_methods(type_))

    def _keep(self, predicate: Callable[[Method], bool]) -> Self:
        self._methods = [m for m in self._methods if predicate(m)]
        return self

    def annotated_with(self, annotation_type: type[Annotation]) -> Self:
        """Keeps the methods carrying an annotation of annotation_type."""
        return self._keep(lambda m: runtime.is_annotation_present(m, annotation_type))

    def named(self, *names: str) -> Self:
        """Keeps the methods whose name is one of names."""
        return self._keep(lambda m: contains(names, runtime.method_name(m)))

    def with_return_type(self, return_type: Any) -> Self:
        """Keeps the methods whose return type equals return_type. None stands for NoneType."""
        expected = normalize_type(return_type)
        return self._keep(lambda m: runtime.return_type(m) == expected)

    def with_parameter_types(self, *parameter_types: Any) -> Self:
        """Keeps the methods whose parameter types equal parameter_types, in order. The implicit
        self or cls parameter is not part of the parameter types.
        """
        expected = tuple(normalize_type(t) for t in parameter_types)
        return self._keep(lambda m: runtime.parameter_types(m) == expected)

    def at_least_one(self) -> Self:
        """Raises unless there is at least one method.

        Raises:
            NoSuchMethodError: Raised when there are no methods.
        """
        throw_unless(len(self._methods) >= 1).no_such_method("There are no methods")
        return self

    def exactly_one(self) -> Self:
        """Raises unless there is exactly one method.

        Raises:
            NoSuchMethodError: Raised when there is not exactly one method.
        """
        throw_unless(len(self._methods) == 1).no_such_method(
            f"Expected only one method. Found {len(self._methods)}"
        )
        return self

    def method(self) -> Method:
        """Returns the single method.

        Raises:
            NoSuchMethodError: Raised when there is not exactly one method.
        """
        return self.exactly_one()._methods[0]

    def methods(self) -> tuple[Method, ...]:
        return tuple(self._methods)

    def set_accessible(self, flag: bool) -> Self:
        """Sets the accessibility flag of every method. The flag belongs to the methods
        themselves, so other views over the same methods observe the change.
        """
        for method in self._methods:
            runtime.set_accessible(method, flag)
        return self

    def __iter__(self) -> Iterator[Method]:
        return iter(tuple(self._methods))

    def __len__(self) -> int:
        return len(self._methods)

    def __repr__(self) -> str:
        names = ", ".join(runtime.method_name(m) for m in self._methods)
        return f"<DeclaredMethods [{names}]>"
