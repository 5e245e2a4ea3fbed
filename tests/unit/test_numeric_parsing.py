"""
Тесты для модуля NumericParsing

Проверяет:
1. Классификацию значений (will_parse_as_num и варианты)
2. Парсинг отдельных форм (hex, binary, exponential)
3. Порядок приоритета форм и default значения
4. Граничные случаи: массивы, bool, NaN/Inf, переполнение экспоненты
"""

import math

import pytest

from src.core.math.numeric_parsing import (
    parse_as_int_else,
    parse_as_num_else,
    parse_binary_string_to_num,
    parse_expo_string_to_num,
    parse_hex_string_to_num,
    will_parse_as_float_with_decimals,
    will_parse_as_int,
    will_parse_as_num,
)

# =============================================================================
# ПАРСЕРЫ ОТДЕЛЬНЫХ ФОРМ
# =============================================================================


class TestSingleFormParsers:
    """Тесты для parse_expo/hex/binary_string_to_num"""

    def test_expo_positive_exponent(self) -> None:
        """Экспоненциальная форма с положительным показателем"""
        assert parse_expo_string_to_num("1.5e3") == pytest.approx(1500.0)

    def test_expo_negative_exponent(self) -> None:
        """Экспоненциальная форма с отрицательным показателем"""
        assert parse_expo_string_to_num("12E-3") == pytest.approx(0.012)

    def test_expo_requires_two_digit_mantissa(self) -> None:
        """Мантисса из одной цифры не распознаётся экспоненциальной формой"""
        assert math.isnan(parse_expo_string_to_num("1e5"))

    def test_expo_overflow_gives_infinity(self) -> None:
        """Переполнение экспоненты даёт бесконечность со знаком мантиссы"""
        assert parse_expo_string_to_num("10e400") == math.inf
        assert parse_expo_string_to_num("-10e400") == -math.inf

    def test_hex_signed(self) -> None:
        """Hex со знаком и в любом регистре"""
        assert parse_hex_string_to_num("0x1F") == 31
        assert parse_hex_string_to_num("-0XfF") == -255
        assert parse_hex_string_to_num("+0xa") == 10

    def test_binary_signed(self) -> None:
        """Binary со знаком"""
        assert parse_binary_string_to_num("0b101") == 5
        assert parse_binary_string_to_num("-0B11") == -3

    def test_non_matching_forms_give_nan(self) -> None:
        """Несовпадающая форма даёт NaN"""
        assert math.isnan(parse_hex_string_to_num("0xZZ"))
        assert math.isnan(parse_binary_string_to_num("0b102"))
        assert math.isnan(parse_expo_string_to_num("abc"))

    def test_non_string_gives_nan(self) -> None:
        """Не-строка даёт NaN"""
        assert math.isnan(parse_hex_string_to_num(31))
        assert math.isnan(parse_binary_string_to_num(None))
        assert math.isnan(parse_expo_string_to_num(1.5))


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


class TestWillParseAsNum:
    """Тесты для will_parse_as_num"""

    @pytest.mark.parametrize(
        "value",
        ["123", "-12.5", ".5", "0x1A", "-0b101", "1.5e3", "1e6", " 12 ", 42, 3.5, 0],
    )
    def test_numeric_values(self, value) -> None:
        """Все четыре текстовые формы и конечные числа распознаются"""
        assert will_parse_as_num(value) is True

    @pytest.mark.parametrize(
        "value",
        ["", "abc", "12abc", "1.2.3", "0x", "0b2", "1e400", "10e400", "Infinity"],
    )
    def test_non_numeric_strings(self, value) -> None:
        """Строки вне четырёх форм и с бесконечным результатом отклоняются"""
        assert will_parse_as_num(value) is False

    def test_array_is_never_numeric(self) -> None:
        """Одноэлементный массив не считается числом"""
        assert will_parse_as_num([123]) is False
        assert will_parse_as_num(["123"]) is False
        assert will_parse_as_num((1,)) is False

    def test_bool_and_none_are_not_numeric(self) -> None:
        """bool и None не считаются числами"""
        assert will_parse_as_num(True) is False
        assert will_parse_as_num(False) is False
        assert will_parse_as_num(None) is False

    def test_nan_and_inf_are_not_numeric(self) -> None:
        """NaN и Inf не считаются числами"""
        assert will_parse_as_num(math.nan) is False
        assert will_parse_as_num(math.inf) is False
        assert will_parse_as_num(-math.inf) is False


class TestParseAsNumElse:
    """Тесты для parse_as_num_else"""

    def test_precedence_binary_before_hex(self) -> None:
        """Binary форма имеет приоритет"""
        assert parse_as_num_else(None)("0b11") == 3

    def test_zero_from_earlier_form_is_kept(self) -> None:
        """Ноль из ранней формы не проваливается в следующую форму"""
        result = parse_as_num_else(None)("0x0")
        assert result == 0
        assert isinstance(result, int)

    def test_exponential_and_decimal(self) -> None:
        """Экспоненциальная и десятичная формы дают float"""
        assert parse_as_num_else(None)("1.5e3") == pytest.approx(1500.0)
        assert parse_as_num_else(None)("1e6") == 1_000_000
        assert parse_as_num_else(None)("-12.5") == -12.5

    def test_numbers_pass_through(self) -> None:
        """Числовые значения возвращаются как есть"""
        assert parse_as_num_else(None)(7) == 7
        assert parse_as_num_else(None)(2.5) == 2.5

    def test_default_returned_for_garbage(self) -> None:
        """Для нераспознанных значений возвращается default"""
        assert parse_as_num_else("fallback")("hello") == "fallback"
        assert parse_as_num_else(0)([1]) == 0

    def test_default_is_nan(self) -> None:
        """По умолчанию default = NaN"""
        assert math.isnan(parse_as_num_else()("hello"))

    def test_idempotent(self) -> None:
        """Повторный парсинг результата даёт тот же результат"""
        parse = parse_as_num_else(None)
        for value in ["0x1F", "-0b101", "1.5e3", "42", "-3.25"]:
            once = parse(value)
            assert parse(once) == once


class TestIntegerVariants:
    """Тесты для will_parse_as_int, parse_as_int_else, will_parse_as_float_with_decimals"""

    def test_will_parse_as_int(self) -> None:
        """Целые значения во всех формах"""
        assert will_parse_as_int("42") is True
        assert will_parse_as_int("0x10") is True
        assert will_parse_as_int("1.0") is True
        assert will_parse_as_int("1.5") is False
        assert will_parse_as_int("abc") is False

    def test_parse_as_int_else_returns_int(self) -> None:
        """Результат имеет тип int"""
        result = parse_as_int_else(None)("1e3")
        assert result == 1000
        assert isinstance(result, int)

    def test_parse_as_int_else_default(self) -> None:
        """Дробные значения дают default"""
        assert parse_as_int_else(None)("1.5") is None
        assert math.isnan(parse_as_int_else()("abc"))

    def test_will_parse_as_float_with_decimals(self) -> None:
        """Только значения с ненулевой дробной частью"""
        assert will_parse_as_float_with_decimals("1.5") is True
        assert will_parse_as_float_with_decimals(2.25) is True
        assert will_parse_as_float_with_decimals("2") is False
        assert will_parse_as_float_with_decimals("2.0") is False
        assert will_parse_as_float_with_decimals("abc") is False


class TestExactForms:
    """Форма должна совпадать со всей строкой"""

    @pytest.mark.parametrize(
        "parser, token",
        [
            (parse_binary_string_to_num, "0b101\n"),
            (parse_hex_string_to_num, "0x1A\n"),
            (parse_expo_string_to_num, "1.5e3\n"),
        ],
    )
    def test_trailing_newline_rejected_by_form(self, parser, token) -> None:
        """Завершающий перевод строки не входит в форму"""
        assert math.isnan(parser(token))

    @pytest.mark.parametrize("token", ["0b101\n", "0x1A\n", "-0B11\n"])
    def test_prefixed_token_with_newline_not_numeric(self, token) -> None:
        assert will_parse_as_num(token) is False
        assert parse_as_num_else(None)(token) is None

    def test_decimal_still_allows_surrounding_whitespace(self) -> None:
        """Plain decimal допускает окружающие пробельные символы"""
        assert parse_as_num_else(None)(" 1.5\n") == 1.5


class TestBigIntegers:
    """int вне диапазона float не вызывает OverflowError"""

    BIG = 10**400

    def test_will_parse_as_num(self) -> None:
        assert will_parse_as_num(self.BIG) is True
        assert will_parse_as_num(-self.BIG) is True

    def test_parse_as_num_else_passes_through(self) -> None:
        assert parse_as_num_else(None)(self.BIG) == self.BIG

    def test_integer_variants(self) -> None:
        assert will_parse_as_int(self.BIG) is True
        assert parse_as_int_else(None)(self.BIG) == self.BIG
        assert will_parse_as_float_with_decimals(self.BIG) is False
