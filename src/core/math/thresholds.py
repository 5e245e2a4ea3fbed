"""
Thresholds — Детекция пересечения границ и полос

Чистые предикаты над парой последовательных показаний (previous, current)
относительно одной границы или закрытой полосы [lower, upper].

СЕМАНТИКА:
- rise through b:  previous < b < current
- fall through b:  previous > b > current
- enter band:      current внутри [lower, upper] И вход снизу (через lower)
                   или сверху (через upper)
- exit band:       previous внутри [lower, upper] И выход вверх через upper
                   или вниз через lower

Переход, перепрыгивающий полосу целиком (previous < lower, current > upper
или наоборот), не считается ни входом, ни выходом: ни одна из точек
не находилась внутри полосы.
"""

from typing import Callable

SamplePredicate = Callable[[float, float], bool]


def did_rise_through_boundary(boundary: float) -> SamplePredicate:
    """
    Предикат пересечения границы снизу вверх.

    Args:
        boundary: Граница

    Returns:
        Функция (previous, current) → previous < boundary < current

    Examples:
        >>> did_rise_through_boundary(36.12)(30, 40)
        True
        >>> did_rise_through_boundary(36.12)(37, 40)
        False
    """

    def predicate(previous: float, current: float) -> bool:
        return previous < boundary < current

    return predicate


def did_fall_through_boundary(boundary: float) -> SamplePredicate:
    """
    Предикат пересечения границы сверху вниз.

    Returns:
        Функция (previous, current) → previous > boundary > current
    """

    def predicate(previous: float, current: float) -> bool:
        return previous > boundary > current

    return predicate


def is_within_band(upper: float, lower: float, value: float) -> bool:
    """Проверка принадлежности значения закрытой полосе [lower, upper]."""
    return lower <= value <= upper


def did_enter_band(upper: float, lower: float) -> SamplePredicate:
    """
    Предикат входа в полосу [lower, upper].

    Порядок аргументов: сначала верхняя граница, затем нижняя.

    Args:
        upper: Верхняя граница полосы (включительно)
        lower: Нижняя граница полосы (включительно)

    Returns:
        Функция (previous, current) → bool

    Examples:
        >>> enter = did_enter_band(30, 20)
        >>> enter(36, 25)  # сверху
        True
        >>> enter(19, 25)  # снизу
        True
        >>> enter(19, 36)  # перепрыгнули полосу
        False
        >>> enter(21, 22)  # остались внутри
        False
    """
    enter_from_bottom = did_rise_through_boundary(lower)
    enter_from_top = did_fall_through_boundary(upper)

    def predicate(previous: float, current: float) -> bool:
        if not is_within_band(upper, lower, current):
            return False
        return enter_from_top(previous, current) or enter_from_bottom(
            previous, current
        )

    return predicate


def did_exit_band(upper: float, lower: float) -> SamplePredicate:
    """
    Предикат выхода из полосы [lower, upper].

    Args:
        upper: Верхняя граница полосы (включительно)
        lower: Нижняя граница полосы (включительно)

    Returns:
        Функция (previous, current) → bool

    Examples:
        >>> leave = did_exit_band(30, 20)
        >>> leave(25, 36)
        True
        >>> leave(36, 19)
        False
    """
    exit_through_upper = did_rise_through_boundary(upper)
    exit_through_lower = did_fall_through_boundary(lower)

    def predicate(previous: float, current: float) -> bool:
        if not is_within_band(upper, lower, previous):
            return False
        return exit_through_upper(previous, current) or exit_through_lower(
            previous, current
        )

    return predicate
