"""
Strings — Строковые утилиты и конверсии

Большинство функций — фабрики (curried форма): конфигурация передаётся
первым вызовом, строка — вторым. Это позволяет собирать их через compose.
"""

import math
import re
import string
from typing import Any, Callable, Final, Sequence

from src.core.functional.arrays import column_at, reverse
from src.core.functional.combinators import compose
from src.core.functional.predicates import is_string, is_string_else, same_as

# =============================================================================
# КЛАССЫ СИМВОЛОВ
# =============================================================================

NUMERIC_INT: Final[tuple[int, ...]] = tuple(range(10))
NUMERIC_STRING: Final[tuple[str, ...]] = tuple(string.digits)
SIGNED_NUMERIC_STRING: Final[tuple[str, ...]] = ("-", *NUMERIC_STRING)
FLOAT_STRING: Final[tuple[str, ...]] = (".", *SIGNED_NUMERIC_STRING)
ALPHA_LOWER: Final[tuple[str, ...]] = tuple(string.ascii_lowercase)
ALPHA_UPPER: Final[tuple[str, ...]] = tuple(string.ascii_uppercase)
ALPHA_NUM: Final[tuple[str, ...]] = (*ALPHA_LOWER, *ALPHA_UPPER, *NUMERIC_STRING)


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def to_lower_case(x: str) -> str:
    return x.lower()


def to_upper_case(x: str) -> str:
    return x.upper()


def to_string(x: Any) -> str:
    return str(x)


def to_number(x: Any) -> int | float:
    """
    Конверсия значения в число; NaN если конверсия невозможна.

    Строки распознаются как целые (в т.ч. с префиксом 0x/0o/0b),
    затем как float. Пустая строка даёт 0.

    Examples:
        >>> to_number("021")
        21
        >>> to_number("0x10")
        16
        >>> to_number("1.5")
        1.5
        >>> to_number("abc")
        nan
    """
    if isinstance(x, bool):
        return int(x)
    if isinstance(x, (int, float)):
        return x
    if not isinstance(x, str):
        return math.nan

    stripped = x.strip()
    if not stripped:
        return 0
    for base in (10, 0):
        try:
            return int(stripped, base)
        except ValueError:
            continue
    try:
        return float(stripped)
    except ValueError:
        return math.nan


def negate(n: Any) -> bool:
    return not n


def quote(delim: str) -> Callable[[Any], Any]:
    """
    Фабрика: строка, содержащая delim, берётся в двойные кавычки.

    Examples:
        >>> quote(",")("Hello, there")
        '"Hello, there"'
        >>> quote(",")("Hello")
        'Hello'
    """

    def apply(s: Any) -> Any:
        if is_string(s) and delim in s:
            return f'"{s}"'
        return s

    return apply


any_to_lower_case: Callable[[Any], str] = compose(to_lower_case, to_string)


# =============================================================================
# ПРОВЕРКИ И ОЧИСТКА
# =============================================================================


def left_pad_with_to(v: str, n: int | str) -> Callable[[str], str]:
    """
    Фабрика дополнения строки слева до длины n первым символом v.

    Строка длиннее n обрезается слева до последних n символов.

    Examples:
        >>> left_pad_with_to("-", 10)("hello")
        '-----hello'
        >>> left_pad_with_to("0", 3)("12345")
        '345'
    """
    fill = v[0]
    width = int(n)

    def pad(s: str) -> str:
        if width <= 0:
            return ""
        return s.rjust(width, fill)[-width:]

    return pad


def only_includes(
    a: Sequence[str], ret_bool: bool = False
) -> Callable[[str], str | bool]:
    """
    Фабрика проверки, что строка состоит только из символов a.

    Args:
        a: Допустимые символы
        ret_bool: True — возвращать bool; False — возвращать строку
            при успехе и False при неудаче

    Examples:
        >>> only_includes(("a", "b"))("abba")
        'abba'
        >>> only_includes(("a", "b"), True)("abc")
        False
    """

    def check(s: str) -> str | bool:
        all_good = all(e in a for e in s)
        if not all_good:
            return False
        return True if ret_bool else s

    return check


def string_if_not_empty_else(default: Any) -> Callable[[str], Any]:
    def check(s: str) -> Any:
        return default if s == "" else s

    return check


string_is_only_digits: Callable[[Any], bool] = compose(
    only_includes(NUMERIC_STRING, True),
    string_if_not_empty_else("_"),
    is_string_else("_"),
)

string_is_alpha_numeric: Callable[[Any], bool] = compose(
    only_includes(ALPHA_NUM, True),
    string_if_not_empty_else("_"),
    is_string_else("_"),
)


def string_strip_non_float_digits(s: str) -> str:
    """Удаление всех символов кроме цифр, '-' и '.'."""
    return "".join(e for e in s if e in FLOAT_STRING)


def strip_leading_char(c: str) -> Callable[[str], str]:
    def strip(s: str) -> str:
        return s.removeprefix(c)

    return strip


def strip_trailing_char(c: str) -> Callable[[str], str]:
    """
    Examples:
        >>> strip_trailing_char(" there")("hello there")
        'hello'
    """

    def strip(s: str) -> str:
        return s.removesuffix(c)

    return strip


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def split(sep: str) -> Callable[[str], list[str]]:
    """Фабрика split; пустой разделитель разбивает строку на символы."""

    def apply(x: str) -> list[str]:
        return list(x) if sep == "" else x.split(sep)

    return apply


def replace(pattern: str, replacement: str) -> Callable[[str], str]:
    """Замена только первого вхождения."""

    def apply(x: str) -> str:
        return x.replace(pattern, replacement, 1)

    return apply


def replace_all(pattern: str, replacement: str) -> Callable[[str], str]:
    """Замена всех совпадений регулярного выражения pattern."""
    compiled = re.compile(pattern)

    def apply(x: str) -> str:
        return compiled.sub(replacement, x)

    return apply


def join(sep: str) -> Callable[[Sequence[Any]], str]:
    def apply(x: Sequence[Any]) -> str:
        return sep.join(str(e) for e in x)

    return apply


def join2(sep: str) -> Callable[..., str]:
    """Фабрика join для позиционных аргументов: join2('-')(1, 2) == '1-2'."""

    def apply(*x: Any) -> str:
        return join(sep)(x)

    return apply


def append(x: str, y: str) -> str:
    return y + x


def always_append(x: str) -> Callable[[str], str]:
    def apply(y: str) -> str:
        return y + x

    return apply


def prepend(x: str) -> Callable[[str], str]:
    def apply(y: str) -> str:
        return x + y

    return apply


def interleave(j: str) -> Callable[[str], str]:
    """
    Чередование символов строки с j, начиная с j.

    Examples:
        >>> interleave("|")("hello")
        '|h|e|l|l|o'
    """

    def apply(s: str) -> str:
        return "".join(f"{j}{v}" for v in s)

    return apply


def interleave2(j: str) -> Callable[[str], str]:
    """
    Чередование символов строки с j, начиная с символа строки.

    Examples:
        >>> interleave2("|")("hello")
        'h|e|l|l|o'
    """

    def apply(s: str) -> str:
        return j.join(s)

    return apply


def count_sub_string(sub_str: str) -> Callable[[str], int]:
    """
    Фабрика подсчёта неперекрывающихся вхождений подстроки.

    Examples:
        >>> count_sub_string("th")("the three truths")
        3
    """

    def count(s: str) -> int:
        return s.count(sub_str)

    return count


string_reverse: Callable[[str], str] = compose(join(""), reverse)


def lcp(*args: str) -> str:
    """
    Наибольший общий префикс произвольного количества строк.

    Examples:
        >>> lcp("hello", "helicopter")
        'hel'
        >>> lcp()
        ''
    """
    elements_at = column_at(args)
    prefix = ""
    n = 0
    while True:
        column = elements_at(n)
        el = column[0] if column else None
        if not el or not all(map(same_as(el), column)):
            return prefix
        prefix += el
        n += 1
