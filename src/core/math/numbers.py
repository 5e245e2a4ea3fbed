"""
Numbers — Числовые утилиты общего назначения

Модуль содержит небольшие чистые функции над числами:
- округление с заданной точностью (p_round)
- мягкая конверсия значений в числа (maybe_number)
- целочисленное деление (div_mod, div_mod2), квадратное уравнение
- контрольные суммы Luhn и конверсия IMEISV → IMEI
- энтропия Шеннона, числа прописью, экстраполяция, формат байтов
"""

import math
from collections import Counter
from typing import Any, Callable, Final, NamedTuple, Optional

from src.core.functional.arrays import reverse
from src.core.functional.combinators import compose
from src.core.functional.strings import join, to_number, to_string
from src.core.math.numeric_parsing import parse_as_num_else

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Максимальное целое, точно представимое в IEEE-754 double
MAX_SAFE_INTEGER: Final[int] = 2**53 - 1

# Верхняя граница |n|, для которой float ещё печатается без экспоненты
SIGNED_INT_MAX_ABS: Final[float] = 1e21

BYTE_UNIT_BASE: Final[int] = 1024
BYTE_UNITS: Final[tuple[str, ...]] = (
    "B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB",
)

_UNITS: Final[tuple[str, ...]] = (
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen",
)
_TENS: Final[tuple[str, ...]] = (
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy",
    "eighty", "ninety",
)
_BIG: Final[tuple[str, ...]] = ("", "thousand") + tuple(
    f"{prefix}illion"
    for prefix in (
        "m", "b", "tr", "quadr", "quint", "sext", "sept", "oct", "non", "dec",
    )
)


class LuhnResult(NamedTuple):
    """Результат проверки Luhn: флаг валидности и сумма / 10."""

    valid: bool
    check: float


# =============================================================================
# ПРЕДСТАВЛЕНИЕ ЧИСЕЛ
# =============================================================================


def is_negative_zero(x: float) -> bool:
    """Проверка знака нуля: True только для -0.0."""
    return x == 0 and math.copysign(1.0, x) < 0


def to_int(n: float) -> int:
    """
    Отбрасывание дробной части с приведением к signed int32.

    В отличие от math.floor, -1.9 превращается в -1, а не в -2.
    NaN/Inf превращаются в 0.

    Examples:
        >>> to_int(3.999)
        3
        >>> to_int(-3.999)
        -3
    """
    if not isinstance(n, int) and not math.isfinite(n):
        return 0
    return ((int(n) + 2**31) % 2**32) - 2**31


def is_signed_int(a: Any) -> bool:
    """
    Проверка, что значение — целое число, которое можно передать в JSON
    как число (без экспоненты).

    Examples:
        >>> is_signed_int(-1234)
        True
        >>> is_signed_int(1.0)
        True
        >>> is_signed_int(1.01)
        False
    """
    if isinstance(a, bool):
        return False
    if isinstance(a, int):
        return True
    if isinstance(a, float):
        return math.isfinite(a) and a.is_integer() and abs(a) < SIGNED_INT_MAX_ABS
    return False


def p_round(precision: int) -> Callable[[float], float]:
    """
    Фабрика округления до precision знаков после запятой.

    Использует round half up (floor(x + 0.5)), а не banker's rounding
    встроенного round().

    Examples:
        >>> p_round(3)(2 / 3)
        0.667
        >>> p_round(0)(2 / 3)
        1.0
    """
    factor = math.pow(10, precision)

    def rounder(number: float) -> float:
        return math.floor(number * factor + 0.5) / factor

    return rounder


def _normalize(n: int | float) -> int | float:
    if isinstance(n, float) and n.is_integer() and abs(n) <= MAX_SAFE_INTEGER:
        return int(n)
    return n


def maybe_number(s: Any) -> Any:
    """
    Вернуть число, если значение в него конвертируется, иначе вернуть как есть.

    Строки с ведущим нулём ('007', '0x1F') не конвертируются, кроме '0.xxx'.
    Значения больше MAX_SAFE_INTEGER не конвертируются.

    Args:
        s: Исходное значение

    Returns:
        int/float или исходное значение

    Examples:
        >>> maybe_number("123")
        123
        >>> maybe_number("hello")
        'hello'
        >>> maybe_number(None) is None
        True
    """
    if s is None or isinstance(s, bool):
        return s
    if isinstance(s, (int, float)):
        return s
    if not isinstance(s, str):
        return s
    if len(s) > 1 and s.startswith("0") and not s.startswith("0."):
        return s

    parsed = parse_as_num_else(None)(s)
    if parsed is None or parsed > MAX_SAFE_INTEGER:
        return s
    return _normalize(parsed)


num_reverse: Callable[[Any], int | float] = compose(
    to_number, join(""), reverse, to_string
)
num_reverse.__doc__ = """Разворот цифр числа: 123 → 321, 120 → 21."""


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def div_mod(y: int) -> Callable[[int], tuple[int, int]]:
    """
    Фабрика целочисленного деления: seed y делится на аргумент x.

    Examples:
        >>> div_mod(10)(3)
        (3, 1)
    """

    def divide(x: int) -> tuple[int, int]:
        return divmod(y, x)

    return divide


def div_mod2(x: int) -> Callable[[int], tuple[int, int]]:
    """
    Фабрика целочисленного деления: аргумент y делится на seed x.

    Examples:
        >>> div_mod2(10)(3)
        (0, 3)
    """

    def divide(y: int) -> tuple[int, int]:
        return divmod(y, x)

    return divide


def factorize(a: float, b: float, c: float) -> float:
    """
    Положительный корень Ax² + Bx - C = 0.

    Returns:
        x или NaN при отрицательном дискриминанте
    """
    discriminant = b**2 - 4 * a * (-c)
    if discriminant < 0:
        return math.nan
    return (-b + math.sqrt(discriminant)) / (2 * a)


# =============================================================================
# КОНТРОЛЬНЫЕ СУММЫ
# =============================================================================


def luhn(n: int | str) -> LuhnResult:
    """
    Luhn checksum для номера (кредитные карты, IMEI).

    Цифры обходятся справа налево; каждая вторая удваивается, цифры
    удвоенного значения суммируются.

    Args:
        n: Номер (int или строка цифр)

    Returns:
        LuhnResult(valid=sum % 10 == 0, check=sum / 10)

    Examples:
        >>> luhn(35956805108414)
        LuhnResult(valid=True, check=6.0)
        >>> luhn(35956805108413)
        LuhnResult(valid=False, check=5.9)
    """
    total = 0
    for i, char in enumerate(reversed(str(n))):
        digit = int(char)
        if i % 2 == 0:
            total += digit
        else:
            total += sum(int(d) for d in str(digit * 2))
    return LuhnResult(valid=total % 10 == 0, check=total / 10)


def imeisv_to_imei(n: int | str) -> str:
    """
    Конверсия IMEISV (16 цифр) в IMEI (15 цифр).

    Форматы (с 2004):
        IMEI    AA-BBBBBB-CCCCCC-D
        IMEISV  AA-BBBBBB-CCCCCC-EE

        TAC : Type Allocation Code (AA + BBBBBB)
        SN  : Serial Number (CCCCCC)
        CD  : Check Digit по алгоритму Luhn (D)
        SVN : Software Version Number (EE)

    Если первые 14 цифр не проходят Luhn, возвращается исходное значение
    как строка.

    Examples:
        >>> imeisv_to_imei("3595680510841401")
        '359568051084146'
    """
    value = str(n)
    body = value[:14]
    result = luhn(body)
    if result.valid:
        return f"{body}{int(result.check)}"
    return value


# =============================================================================
# ПРОЧЕЕ
# =============================================================================


def shannon(s: str) -> float:
    """
    Энтропия Шеннона строки (бит на символ).

    Examples:
        >>> shannon("0123")
        2.0
    """
    length = len(s)
    return -sum(
        (count / length) * math.log2(count / length)
        for count in Counter(s).values()
    ) + 0.0


def english_number(value: int | float) -> Optional[str]:
    """
    Число прописью на английском.

    Дробные значения не поддерживаются (возвращается None).

    Examples:
        >>> english_number(12)
        'twelve'
        >>> english_number(1005)
        'one thousand and five'
        >>> english_number(3.2) is None
        True
    """
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)

    if value < 0:
        return f"negative {english_number(-value)}"
    if value < 20:
        return _UNITS[value]
    if value < 100:
        quotient, remainder = divmod(value, 10)
        return f"{_TENS[quotient]} {_UNITS[remainder]}".replace(" zero", "")
    if value < 1000:
        quotient, remainder = divmod(value, 100)
        return (
            f"{english_number(quotient)} hundred and {english_number(remainder)}"
        ).replace(" and zero", "")

    chunks: list[int] = []
    while value != 0:
        value, remainder = divmod(value, 1000)
        chunks.append(remainder)
    if len(chunks) > len(_BIG):
        return None

    text: list[str] = []
    for i, chunk in enumerate(chunks):
        if chunk > 0:
            suffix = "" if i == 0 else f" {_BIG[i]}"
            text.append(f"{english_number(chunk)}{suffix}")
            if i == 0 and chunk < 100:
                text.append("and")
    return ", ".join(reversed(text)).replace(", and,", " and")


def extrapolate(
    p1: tuple[float, float],
    p2: tuple[float, float],
) -> Callable[[float], Optional[tuple[float, float]]]:
    """
    Точка на прямой через p1 и p2 для заданного x.

    Args:
        p1: Первая точка (x1, y1)
        p2: Вторая точка (x2, y2)

    Returns:
        Функция x3 → (x3, y3); None для вертикальной прямой

    Examples:
        >>> extrapolate((0, 0), (5, 0))(3)
        (3, 0)
        >>> extrapolate((0, 0), (0, 5))(3) is None
        True
    """
    x1, y1 = p1
    x2, y2 = p2

    def point_at(x3: float) -> Optional[tuple[float, float]]:
        if y1 == y2:
            return (x3, y1)
        if x1 == x2:
            return None
        slope = (y2 - y1) / (x2 - x1)
        return (x3, y1 + (x3 - x1) * slope)

    return point_at


def format_bytes(precision: Optional[int] = None) -> Callable[[float], str]:
    """
    Фабрика форматирования количества байт в человекочитаемую строку.

    Args:
        precision: Количество значащих цифр (default: 2)

    Examples:
        >>> format_bytes()(1536)
        '1.5 kB'
        >>> format_bytes(3)(1048576)
        '1 MB'
    """
    digits = precision or 2

    def formatter(num_bytes: float) -> str:
        if num_bytes == 0:
            return "0"
        i = math.floor(math.log(num_bytes) / math.log(BYTE_UNIT_BASE))
        scaled = float(f"{num_bytes / BYTE_UNIT_BASE ** i:.{digits}g}")
        return f"{_normalize(scaled)} {BYTE_UNITS[i]}"

    return formatter
