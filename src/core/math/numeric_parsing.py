"""
NumericParsing — Классификация и парсинг числовых токенов

Модуль определяет, можно ли интерпретировать значение как число, и выполняет
сам парсинг. Поддерживаемые текстовые формы:
- decimal (со знаком, с дробной частью, с опциональным экспонентом)
- hexadecimal (префикс 0x/0X, со знаком)
- binary (префикс 0b/0B, со знаком)
- exponential (mantissa[eE]exponent)

ПОРЯДОК ПРИОРИТЕТА ПАРСИНГА:
    binary → hex → exponential → plain decimal

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Массив (list/tuple) никогда не считается числом
2. bool не считается числом
3. NaN/Inf не считаются парсящимися числами
4. Все функции чистые и идемпотентные
"""

import math
import re
from typing import Any, Callable, Final

# =============================================================================
# РЕГУЛЯРНЫЕ ВЫРАЖЕНИЯ
# =============================================================================

EXPO_REGEX: Final[re.Pattern[str]] = re.compile(
    r"^([+-]?[0-9]+\.?[0-9]+)[eE]([+-]?[0-9]+)$", re.IGNORECASE
)
HEX_REGEX: Final[re.Pattern[str]] = re.compile(
    r"^([-+]?)0[xX]([0-9A-F]+)$", re.IGNORECASE
)
BINARY_REGEX: Final[re.Pattern[str]] = re.compile(
    r"^([-+]?)0[bB]([0-1]+)$", re.IGNORECASE
)
NUMBER_REGEX: Final[re.Pattern[str]] = re.compile(
    r"^[-+]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][-+]?[0-9]+)?$"
)

Number = int | float


# =============================================================================
# ПАРСЕРЫ ОТДЕЛЬНЫХ ФОРМ
# =============================================================================


def _sign(sign: str) -> int:
    return -1 if sign == "-" else 1


def parse_expo_string_to_num(s: Any) -> float:
    """
    Парсинг строки в экспоненциальной форме ('1.2e5', '-12E-3').

    Мантисса должна содержать минимум две цифры: '1e5' этой формой
    не распознаётся (такие строки обрабатывает plain decimal).

    Args:
        s: Проверяемое значение

    Returns:
        Число или NaN, если значение не в экспоненциальной форме

    Examples:
        >>> parse_expo_string_to_num("1.5e3")
        1500.0
        >>> parse_expo_string_to_num("abc")
        nan
    """
    if not isinstance(s, str):
        return math.nan
    match = EXPO_REGEX.fullmatch(s)
    if match is None:
        return math.nan
    mantissa, exponent = match.groups()
    try:
        return float(mantissa) * math.pow(10, int(exponent))
    except OverflowError:
        return math.copysign(math.inf, float(mantissa))


def parse_hex_string_to_num(s: Any) -> float | int:
    """
    Парсинг hex строки ('0x1F', '-0XfF').

    Returns:
        int или NaN, если значение не hex
    """
    if not isinstance(s, str):
        return math.nan
    match = HEX_REGEX.fullmatch(s)
    if match is None:
        return math.nan
    sign, digits = match.groups()
    return int(digits, 16) * _sign(sign)


def parse_binary_string_to_num(s: Any) -> float | int:
    """
    Парсинг binary строки ('0b101', '-0B11').

    Returns:
        int или NaN, если значение не binary
    """
    if not isinstance(s, str):
        return math.nan
    match = BINARY_REGEX.fullmatch(s)
    if match is None:
        return math.nan
    sign, digits = match.groups()
    return int(digits, 2) * _sign(sign)


def _parse_decimal(s: str) -> float:
    stripped = s.strip()
    if NUMBER_REGEX.fullmatch(stripped) is None:
        return math.nan
    return float(stripped)


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def _is_plain_number(val: Any) -> bool:
    return isinstance(val, (int, float)) and not isinstance(val, bool)


def will_parse_as_num(val: Any) -> bool:
    """
    Проверка, будет ли значение распознано как число (int или float).

    Правила:
    - str: совпадение с любой из четырёх форм (decimal допускает
      окружающие пробелы); результат должен быть конечным
    - int/float: только конечные значения
    - list/tuple: никогда (даже одноэлементный [123])
    - всё остальное (None, bool, dict, ...): False

    Args:
        val: Проверяемое значение

    Returns:
        True если значение парсится как число

    Examples:
        >>> will_parse_as_num("0x1A")
        True
        >>> will_parse_as_num([123])
        False
        >>> will_parse_as_num("12abc")
        False
    """
    if isinstance(val, (list, tuple)):
        return False

    if isinstance(val, str):
        if BINARY_REGEX.fullmatch(val) or HEX_REGEX.fullmatch(val):
            return True
        if EXPO_REGEX.fullmatch(val):
            return math.isfinite(parse_expo_string_to_num(val))
        return math.isfinite(_parse_decimal(val))

    if _is_plain_number(val):
        # int произвольной длины конечен и во float не переводится
        return isinstance(val, int) or math.isfinite(val)

    return False


def _parse(val: Any) -> Number:
    # Порядок: binary → hex → exponential → decimal.
    # Успех формы определяется совпадением регулярного выражения,
    # а не истинностью результата: '0x0' парсится hex-формой как 0.
    if _is_plain_number(val):
        return val

    for matcher, parser in (
        (BINARY_REGEX, parse_binary_string_to_num),
        (HEX_REGEX, parse_hex_string_to_num),
        (EXPO_REGEX, parse_expo_string_to_num),
    ):
        if matcher.fullmatch(val):
            return parser(val)

    return _parse_decimal(val)


def parse_as_num_else(default: Any = math.nan) -> Callable[[Any], Any]:
    """
    Фабрика парсера: значение парсится как число, иначе возвращается default.

    hex/binary формы дают int, exponential/decimal формы дают float,
    числовые значения возвращаются как есть.

    Args:
        default: Значение при неудачной классификации (default: NaN)

    Returns:
        Функция val → число | default

    Examples:
        >>> parse_as_num_else(None)("-0b101")
        -5
        >>> parse_as_num_else(None)("hello") is None
        True
    """

    def parse(val: Any) -> Any:
        if not will_parse_as_num(val):
            return default
        return _parse(val)

    return parse


def _is_integral(n: Number) -> bool:
    return isinstance(n, int) or n.is_integer()


def will_parse_as_int(val: Any) -> bool:
    """Проверка, что значение парсится как число без дробной части."""
    if not will_parse_as_num(val):
        return False
    return _is_integral(_parse(val))


def parse_as_int_else(default: Any = math.nan) -> Callable[[Any], Any]:
    """
    Фабрика парсера целых чисел.

    Returns:
        Функция val → int | default
    """

    def parse(val: Any) -> Any:
        if not will_parse_as_int(val):
            return default
        return int(_parse(val))

    return parse


def will_parse_as_float_with_decimals(val: Any) -> bool:
    """Проверка, что значение парсится как число с ненулевой дробной частью."""
    if not will_parse_as_num(val):
        return False
    return not _is_integral(_parse(val))
