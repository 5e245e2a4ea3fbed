"""
Predicates — Проверки типов и значений

Строгие проверки без неявных приведений: bool не считается числом,
NaN не считается числом, list не считается объектом.
"""

import math
from typing import Any, Callable, Final, Mapping

BOOL_MAP: Final[Mapping[str, bool]] = {"true": True, "false": False}


def what_type(x: Any) -> str:
    """Имя типа значения ('int', 'str', 'NoneType', ...)."""
    return type(x).__name__


def maybe_bool(s: Any) -> Any:
    """
    Конверсия 'true'/'false' в bool; остальные значения возвращаются как есть.

    Examples:
        >>> maybe_bool("true")
        True
        >>> maybe_bool("yes")
        'yes'
    """
    if isinstance(s, str) and s in BOOL_MAP:
        return BOOL_MAP[s]
    return s


def is_def(t: Any) -> bool:
    return t is not None


def is_undefined(t: Any) -> bool:
    return t is None


def is_string(n: Any) -> bool:
    return isinstance(n, str)


def is_string_else(default: Any) -> Callable[[Any], Any]:
    """Фабрика: строка возвращается как есть, иначе default."""

    def check(n: Any) -> Any:
        return n if is_string(n) else default

    return check


def is_number(n: Any) -> bool:
    """int или float (не bool и не NaN)."""
    if isinstance(n, bool) or not isinstance(n, (int, float)):
        return False
    return not (isinstance(n, float) and math.isnan(n))


def is_object(t: Any) -> bool:
    """Словарь (dict). Списки, множества и прочие коллекции не считаются."""
    return isinstance(t, dict)


def is_array(t: Any) -> bool:
    return isinstance(t, list)


def is_function(n: Any) -> bool:
    return callable(n)


def is_even(t: Any) -> bool:
    """
    Строгая проверка чётности без приведения типов.

    Examples:
        >>> is_even(4)
        True
        >>> is_even("4")
        False
    """
    return is_number(t) and t % 2 == 0


def is_divisible_by(n: float) -> Callable[[Any], bool]:
    """Фабрика предиката делимости на n."""

    def check(x: Any) -> bool:
        return is_number(x) and x % n == 0

    return check


def both(a: Callable[[Any], Any], b: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Конъюнкция двух предикатов: n → a(n) and b(n)."""

    def check(n: Any) -> Any:
        return a(n) and b(n)

    return check


def has_value(v: Any) -> bool:
    """Значение задано: не None и не NaN."""
    if v is None:
        return False
    return not (isinstance(v, float) and math.isnan(v))


def is_empty(o: Any) -> bool:
    """True для пустого dict и для любого значения, не являющегося dict."""
    return not is_object(o) or len(o) == 0


def same_as(v: Any) -> Callable[[Any], bool]:
    def check(e: Any) -> bool:
        return v == e

    return check
