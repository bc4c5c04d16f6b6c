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
Description: Tests for the bound and declared annotation properties.
🦙
"""

__author__ = "Sébastien Gachoud"
__license__ = "MIT"

import pytest

from metareflect.annotations import Annotation
from metareflect.exceptions import NoSuchPropertyError, NoSuchValueError
from metareflect.reflection import (
    BoundAnnotationProperties,
    BoundAnnotationProperty,
    DeclaredAnnotationProperties,
    DeclaredAnnotationProperty,
)


class Schedule(Annotation):
    """Test"""

    cron: str
    retries: int = 3

    @property
    def description(self) -> str:
        return f"{self.cron} x{self.retries}"

    @property
    def broken(self) -> int:
        raise RuntimeError("accessor failure")


class Counter(Annotation):
    """Test"""

    start: int = 0

    @property
    def ticks(self) -> int:
        Counter.calls += 1
        return Counter.calls

    calls = 0


# =============================================================================
# Bound Properties Tests
# =============================================================================


class TestBoundAnnotationProperties:
    """Test the properties bound to an annotation instance."""

    def test_of_lists_properties_in_declaration_order(self):
        """Test that every property is listed, data properties first."""
        properties = BoundAnnotationProperties.of(Schedule(cron="* * * * *"))
        assert [p.name() for p in properties] == ["cron", "retries", "description", "broken"]
        assert len(properties) == 4

    def test_named(self):
        """Test fetching a property by name."""
        prop = BoundAnnotationProperties.of(Schedule(cron="@daily")).named("retries")
        assert isinstance(prop, BoundAnnotationProperty)
        assert prop.name() == "retries"
        assert prop.type() is int
        assert prop.value() == 3

    def test_named_missing(self):
        """Test that an unknown name fails with NoSuchPropertyError."""
        with pytest.raises(NoSuchPropertyError):
            BoundAnnotationProperties.of(Schedule(cron="@daily")).named("missing")

    def test_computed_value(self):
        """Test reading a computed property."""
        prop = BoundAnnotationProperties.of(Schedule(cron="@daily", retries=1)).named(
            "description"
        )
        assert prop.type() is str
        assert prop.value() == "@daily x1"

    def test_value_failure_wraps_cause(self):
        """Test that a failing accessor raises NoSuchValueError chained to its error."""
        prop = BoundAnnotationProperties.of(Schedule(cron="@daily")).named("broken")
        with pytest.raises(NoSuchValueError) as exc_info:
            prop.value()

        assert "Value not retrievable for broken" in str(exc_info.value)
        assert isinstance(exc_info.value.cause, RuntimeError)
        assert exc_info.value.__cause__ is exc_info.value.cause

    def test_value_is_not_cached(self):
        """Test that the accessor is invoked on each call."""
        prop = BoundAnnotationProperties.of(Counter()).named("ticks")
        first = prop.value()
        second = prop.value()
        assert second == first + 1

    def test_as_dict(self):
        """Test reading all the values by name."""
        assert BoundAnnotationProperties.of(Counter(start=2)).named("start").value() == 2

        class Pair(Annotation):
            """Test"""

            a: int = 1
            b: str = "b"

        assert BoundAnnotationProperties.of(Pair(a=5)).as_dict() == {"a": 5, "b": "b"}

    def test_as_dict_propagates_failures(self):
        """Test that as_dict fails when a value cannot be retrieved."""
        with pytest.raises(NoSuchValueError):
            BoundAnnotationProperties.of(Schedule(cron="@daily")).as_dict()

    def test_repr(self):
        """Test the representation of a bound property."""
        prop = BoundAnnotationProperties.of(Counter()).named("start")
        assert repr(prop) == "<BoundAnnotationProperty start of @Counter(start=0)>"


# =============================================================================
# Declared Properties Tests
# =============================================================================


class TestDeclaredAnnotationProperties:
    """Test the properties declared by an annotation type."""

    def test_from_type(self):
        """Test that every property of the type is listed."""
        properties = DeclaredAnnotationProperties.from_type(Schedule)
        assert [p.name() for p in properties] == ["cron", "retries", "description", "broken"]
        assert len(properties) == 4

    def test_named(self):
        """Test fetching a declared property by name."""
        prop = DeclaredAnnotationProperties.from_type(Schedule).named("cron")
        assert isinstance(prop, DeclaredAnnotationProperty)
        assert prop.name() == "cron"
        assert prop.type() is str

    def test_named_missing(self):
        """Test that an unknown name fails with NoSuchPropertyError."""
        with pytest.raises(NoSuchPropertyError) as exc_info:
            DeclaredAnnotationProperties.from_type(Schedule).named("missing")

        assert "missing property not found" in str(exc_info.value)

    def test_default(self):
        """Test reading the default of a declared property."""
        assert DeclaredAnnotationProperties.from_type(Schedule).named("retries").default() == 3

    def test_default_of_required_property(self):
        """Test that a required property has no default."""
        with pytest.raises(NoSuchValueError):
            DeclaredAnnotationProperties.from_type(Schedule).named("cron").default()

    def test_default_of_computed_property(self):
        """Test that a computed property has no default."""
        with pytest.raises(NoSuchValueError):
            DeclaredAnnotationProperties.from_type(Schedule).named("description").default()

    def test_inherited_properties(self):
        """Test that the properties of annotation bases are declared too."""

        class Timed(Schedule):
            """Test"""

            timeout: float = 1.0

        names = [p.name() for p in DeclaredAnnotationProperties.from_type(Timed)]
        assert names == ["cron", "retries", "timeout", "description", "broken"]

    def test_iteration_yields_same_views(self):
        """Test that the properties are built once and shared by iteration and named."""
        properties = DeclaredAnnotationProperties.from_type(Schedule)
        first = list(properties)
        assert all(a is b for a, b in zip(first, properties, strict=True))
        assert properties.named("retries") is first[1]

    def test_repr(self):
        """Test the representation of a declared property."""
        prop = DeclaredAnnotationProperties.from_type(Schedule).named("cron")
        assert repr(prop) == "<DeclaredAnnotationProperty Schedule.cron>"
