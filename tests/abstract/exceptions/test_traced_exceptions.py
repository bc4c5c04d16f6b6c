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
Description: Tests for the TracedException class.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import pytest

from metareflect.exceptions import (
    TracedException,
    format_exception,
    ReflectionError,
    NoSuchValueError,
    NoSuchMethodError,
    ClassNotFoundError,
    NoSuchPropertyError,
    AnnotationModificationError,
)


class TestFormatException:
    """Test cases for the format_exception function."""

    def test_format_exception_with_simple_exception(self):
        """Test formatting a simple exception with traceback."""
        try:
            raise ValueError("Test error message")
        except ValueError as e:
            result = format_exception(e)

            assert "ValueError: Test error message" in result
            assert "Traceback" in result
            assert "test_format_exception_with_simple_exception" in result

    def test_format_exception_with_no_traceback(self):
        """Test formatting an exception that was never raised."""
        result = format_exception(ValueError("No traceback"))

        assert "ValueError: No traceback" in result

    def test_format_exception_renders_cause(self):
        """Test that the cause of a chained exception is rendered."""
        try:
            try:
                raise KeyError("inner")
            except KeyError as inner:
                raise NoSuchValueError("outer") from inner
        except NoSuchValueError as e:
            result = format_exception(e)

        assert "KeyError: 'inner'" in result
        assert "direct cause" in result
        assert "NoSuchValueError: outer" in result


class TestTracedException:
    """Test cases for the TracedException class."""

    def test_traceback_format(self):
        """Test that traceback_format renders the exception."""
        try:
            raise TracedException("traced")
        except TracedException as e:
            result = e.traceback_format()

        assert "TracedException: traced" in result
        assert "test_traceback_format" in result

    def test_cause_is_none_when_not_chained(self):
        """Test that an unchained exception has no cause."""
        assert TracedException("alone").cause is None

    def test_cause_is_the_chained_exception(self):
        """Test that cause exposes the exception given to raise ... from."""
        original = RuntimeError("boom")
        with pytest.raises(NoSuchValueError) as exc_info:
            raise NoSuchValueError("wrapped") from original

        assert exc_info.value.cause is original


class TestReflectionErrors:
    """Test the hierarchy of reflection errors."""

    @pytest.mark.parametrize(
        "error_type",
        [NoSuchMethodError, ClassNotFoundError, NoSuchPropertyError],
    )
    def test_lookup_errors(self, error_type):
        """Test that lookup failures can be caught as LookupError."""
        error = error_type("missing")
        assert isinstance(error, LookupError)
        assert isinstance(error, ReflectionError)
        assert isinstance(error, TracedException)
        assert str(error) == "missing"

    def test_no_such_value_is_not_a_lookup_error(self):
        """Test that value retrieval failures are not lookup failures."""
        assert not isinstance(NoSuchValueError("x"), LookupError)

    def test_modification_error_is_attribute_error(self):
        """Test that modifying an annotation is an AttributeError."""
        assert isinstance(AnnotationModificationError("x"), AttributeError)
