"""
Тесты для модулей Combinators и Predicates
"""

import logging
import math

import pytest

from src.core.functional.combinators import (
    always_false,
    always_null,
    always_true,
    always_undef,
    compose,
    identity,
    log_inline,
    maybe_func,
    partial,
    trace,
)
from src.core.functional.predicates import (
    both,
    has_value,
    is_def,
    is_divisible_by,
    is_empty,
    is_even,
    is_number,
    is_object,
    is_array,
    is_function,
    is_string_else,
    is_undefined,
    maybe_bool,
    same_as,
    what_type,
)
from src.infrastructure.logging import TRACE_LOGGER_NAME

# =============================================================================
# COMBINATORS
# =============================================================================


class TestCompose:
    """Тесты для compose, partial, identity"""

    def test_right_to_left(self) -> None:
        """Самая правая функция применяется первой"""
        add_one = lambda x: x + 1  # noqa: E731
        double = lambda x: x * 2  # noqa: E731
        assert compose(add_one, double)(5) == 11
        assert compose(double, add_one)(5) == 12

    def test_innermost_receives_all_args(self) -> None:
        assert compose(str, pow)(2, 10) == "1024"

    def test_empty_compose_is_identity(self) -> None:
        assert compose()(42) == 42

    def test_partial(self) -> None:
        assert partial(pow, 2)(10) == 1024

    def test_identity(self) -> None:
        marker = object()
        assert identity(marker) is marker


class TestConstants:
    """Тесты для константных функций и maybe_func"""

    def test_always(self) -> None:
        assert always_undef(1, 2) is None
        assert always_null() is None
        assert always_false("x") is False
        assert always_true() is True

    def test_maybe_func(self) -> None:
        assert maybe_func(lambda: 7)() == 7
        assert maybe_func("not callable")() is None


class TestTrace:
    """Тесты для log_inline и trace"""

    def test_log_inline_returns_value(self, caplog) -> None:
        """Значение возвращается без изменений и логируется с tag"""
        caplog.set_level(logging.INFO, logger=TRACE_LOGGER_NAME)
        assert log_inline("value:", [1, 2]) == [1, 2]
        assert "value: [1, 2]" in caplog.text

    def test_trace_in_pipeline(self, caplog) -> None:
        caplog.set_level(logging.INFO, logger=TRACE_LOGGER_NAME)
        pipeline = compose(len, trace("stripped:"), str.strip)
        assert pipeline("  abc ") == 3
        assert "stripped: abc" in caplog.text


# =============================================================================
# PREDICATES
# =============================================================================


class TestTypePredicates:
    """Тесты для проверок типов"""

    def test_what_type(self) -> None:
        assert what_type(1) == "int"
        assert what_type("a") == "str"
        assert what_type(None) == "NoneType"

    def test_is_number(self) -> None:
        assert is_number(1) is True
        assert is_number(1.5) is True
        assert is_number(math.inf) is True
        assert is_number(math.nan) is False
        assert is_number(True) is False
        assert is_number("1") is False

    def test_is_object_and_array(self) -> None:
        assert is_object({}) is True
        assert is_object([]) is False
        assert is_array([]) is True
        assert is_array(()) is False

    def test_is_function(self) -> None:
        assert is_function(len) is True
        assert is_function(1) is False

    def test_def_and_undefined(self) -> None:
        assert is_def(0) is True
        assert is_def(None) is False
        assert is_undefined(None) is True

    def test_is_string_else(self) -> None:
        assert is_string_else("_")("a") == "a"
        assert is_string_else("_")(1) == "_"


class TestValuePredicates:
    """Тесты для проверок значений"""

    def test_maybe_bool(self) -> None:
        assert maybe_bool("true") is True
        assert maybe_bool("false") is False
        assert maybe_bool("yes") == "yes"
        assert maybe_bool(1) == 1

    @pytest.mark.parametrize(
        "value, expected",
        [(4, True), (3, False), (0, True), (-2, True), (4.0, True),
         ("4", False), (None, False), (math.inf, False)],
    )
    def test_is_even(self, value, expected) -> None:
        assert is_even(value) is expected

    def test_is_divisible_by(self) -> None:
        assert is_divisible_by(3)(9) is True
        assert is_divisible_by(3)(10) is False
        assert is_divisible_by(3)("9") is False

    def test_both(self) -> None:
        positive_even = both(is_even, lambda n: n > 0)
        assert positive_even(4) is True
        assert positive_even(-4) is False
        assert positive_even(3) is False

    def test_has_value(self) -> None:
        assert has_value(0) is True
        assert has_value("") is True
        assert has_value(None) is False
        assert has_value(math.nan) is False

    def test_is_empty(self) -> None:
        assert is_empty({}) is True
        assert is_empty({"a": 1}) is False
        assert is_empty([1]) is True

    def test_same_as(self) -> None:
        assert same_as(2)(2) is True
        assert same_as(2)(3) is False
