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
Description: Conditional raising helpers. They keep the cardinality checks of the fluent API
            on a single line.
🦙

Examples:
    >>> throw_if(True).no_such_method("Always raised")  # raises NoSuchMethodError
    >>> throw_unless(True).no_such_method("Never raised")  # does nothing
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

from dataclasses import dataclass

from ..errors import (
    ReflectionError,
    NoSuchMethodError,
    ClassNotFoundError,
    NoSuchValueError,
    NoSuchPropertyError,
)


def guard(condition: bool, error_type: type[ReflectionError], message: str) -> None:
    """Raise error_type with message if condition holds.

    Args:
        condition (bool): Whether to raise.
        error_type (type[ReflectionError]): The error to raise.
        message (str): The error message.

    Raises:
        ReflectionError: An instance of error_type when condition is true.
    """
    if condition:
        raise error_type(message)


@dataclass(frozen=True, slots=True)
class Thrower:
    """Raises one of the reflection errors when armed, does nothing otherwise."""

    armed: bool

    def no_such_method(self, message: str) -> None:
        guard(self.armed, NoSuchMethodError, message)

    def class_not_found(self, message: str) -> None:
        guard(self.armed, ClassNotFoundError, message)

    def no_such_value(self, message: str) -> None:
        guard(self.armed, NoSuchValueError, message)

    def no_such_property(self, message: str) -> None:
        guard(self.armed, NoSuchPropertyError, message)


def throw_if(condition: bool) -> Thrower:
    """Return a thrower that raises if condition is true."""
    return Thrower(bool(condition))


def throw_unless(condition: bool) -> Thrower:
    """Return a thrower that raises unless condition is true."""
    return Thrower(not condition)
