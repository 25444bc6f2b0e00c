"""Tests for the coercion capability and the factories that use it."""

from __future__ import annotations

import msgspec
import pytest

from optional_value import (
    Coercer,
    FunctionCoercer,
    TypeCoercer,
    coerce_to,
    init,
    of,
    of_nullable,
    of_optional_key,
)


class Upper:
    """Minimal hand-written coercer."""

    def __init__(self) -> None:
        self.calls = 0

    def coerce(self, value):
        self.calls += 1
        return str(value).upper()


class TestCoercerProtocol:
    """Tests for the Coercer protocol."""

    def test_type_coercer_is_coercer(self) -> None:
        assert isinstance(TypeCoercer(int), Coercer)

    def test_function_coercer_is_coercer(self) -> None:
        assert isinstance(FunctionCoercer(str), Coercer)

    def test_custom_class_is_coercer(self) -> None:
        assert isinstance(Upper(), Coercer)

    def test_plain_function_is_not_coercer(self) -> None:
        assert not isinstance(str.upper, Coercer)


class TestTypeCoercer:
    """Tests for msgspec-backed coercion."""

    @pytest.mark.usefixtures("fresh_config")
    def test_matching_type(self) -> None:
        assert TypeCoercer(int).coerce(5) == 5

    @pytest.mark.usefixtures("fresh_config")
    def test_strict_by_default(self) -> None:
        with pytest.raises(msgspec.ValidationError):
            TypeCoercer(int).coerce("5")

    def test_lax(self) -> None:
        assert TypeCoercer(int, strict=False).coerce("5") == 5

    def test_container_type(self) -> None:
        assert coerce_to(list[int]).coerce([1, 2]) == [1, 2]

    def test_struct_target(self) -> None:
        class Point(msgspec.Struct):
            x: int
            y: int

        assert coerce_to(Point).coerce({"x": 1, "y": 2}) == Point(1, 2)

    @pytest.mark.usefixtures("fresh_config")
    def test_config_default_strictness(self) -> None:
        """strict=None defers to the configured default."""
        init(strict_coercion=False)
        assert coerce_to(int).coerce("7") == 7

    @pytest.mark.usefixtures("fresh_config")
    def test_explicit_strictness_beats_config(self) -> None:
        init(strict_coercion=False)
        with pytest.raises(msgspec.ValidationError):
            coerce_to(int, strict=True).coerce("7")

    def test_coerce_to_builds_type_coercer(self) -> None:
        assert coerce_to(str, strict=False) == TypeCoercer(str, False)


class TestFunctionCoercer:
    """Tests for callable adaptation."""

    def test_calls_function(self) -> None:
        assert FunctionCoercer(str.upper).coerce("foo") == "FOO"

    def test_errors_propagate(self) -> None:
        with pytest.raises(ValueError):
            FunctionCoercer(int).coerce("not a number")


class TestFactoriesWithCoercion:
    """Tests for of(), of_nullable() and of_optional_key() with a coercer."""

    def test_of_without_coercer_stores_as_is(self) -> None:
        assert of("5").get() == "5"

    def test_of_with_coercer(self) -> None:
        assert of("foo", Upper()).get() == "FOO"

    @pytest.mark.usefixtures("fresh_config")
    def test_of_coercion_failure_propagates(self) -> None:
        with pytest.raises(msgspec.ValidationError):
            of("x", coerce_to(int))

    def test_of_nullable_with_coercer(self) -> None:
        assert of_nullable("foo", Upper()).get() == "FOO"

    def test_of_nullable_none_skips_coercer(self) -> None:
        coercer = Upper()
        assert of_nullable(None, coercer).is_empty()
        assert coercer.calls == 0

    @pytest.mark.usefixtures("fresh_config")
    def test_optional_key_exists(self) -> None:
        assert of_optional_key({"foo": "bar"}, "foo", coerce_to(str)).get() == "bar"

    def test_optional_key_missing(self) -> None:
        coercer = Upper()
        assert of_optional_key({"foo": "bar"}, "bar", coercer).is_empty()
        assert coercer.calls == 0

    def test_optional_key_coerces(self) -> None:
        port = of_optional_key({"port": "8080"}, "port", coerce_to(int, strict=False))
        assert port.get() == 8080

    def test_optional_key_none_value_is_present(self) -> None:
        """A key that exists is present even when it maps to None."""
        opt = of_optional_key({"foo": None}, "foo", FunctionCoercer(lambda v: v))
        assert opt.is_present()

    @pytest.mark.usefixtures("fresh_config")
    def test_optional_key_coercion_failure_propagates(self) -> None:
        with pytest.raises(msgspec.ValidationError):
            of_optional_key({"foo": "bar"}, "foo", coerce_to(int))
