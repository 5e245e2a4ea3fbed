"""
Generators — Идентификаторы, счётчики и псевдослучайные значения

Используется модуль random: значения НЕ криптографически стойкие и
уникальность идентификаторов не гарантируется.
"""

import itertools
import random
import string
import time
from typing import Callable, Final, Iterator, Optional

from src.core.functional.arrays import push, remove_random
from src.core.functional.strings import join

# Верхняя граница (исключительно) для случайных компонент строки
RANDOM_COMPONENT_BOUND: Final[int] = 2**31

_BASE36_DIGITS: Final[str] = string.digits + string.ascii_lowercase


def _to_base36(n: int) -> str:
    if n == 0:
        return "0"
    digits: list[str] = []
    while n:
        n, remainder = divmod(n, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


# =============================================================================
# СЧЁТЧИКИ
# =============================================================================


def id_gen(start: Optional[int] = None) -> Iterator[int]:
    """
    Бесконечный генератор последовательных id.

    Начинает с start + 1; без start (или при start == 0) начинает с 0.

    Examples:
        >>> ids = id_gen(5)
        >>> next(ids), next(ids)
        (6, 7)
    """
    return itertools.count(start + 1 if start else 0)


class PrivateCounter:
    """Счётчик с собственным состоянием: каждый вызов возвращает
    текущее значение и увеличивает его на 1."""

    def __init__(self, start: Optional[int] = None) -> None:
        self._value = start or 0

    def __call__(self) -> int:
        value = self._value
        self._value += 1
        return value


def private_counter(start: Optional[int] = None) -> PrivateCounter:
    """
    Фабрика независимого счётчика.

    Examples:
        >>> counter = private_counter()
        >>> counter(), counter()
        (0, 1)
    """
    return PrivateCounter(start)


# =============================================================================
# СЛУЧАЙНЫЕ ЗНАЧЕНИЯ
# =============================================================================


def make_random_string() -> str:
    """
    Псевдослучайная строка в base-36.

    Первая часть — случайное число, вторая — случайное число, XOR
    с текущим временем в миллисекундах.
    """
    now_ms = time.time_ns() // 1_000_000
    first = random.randrange(RANDOM_COMPONENT_BOUND)
    second = abs(random.randrange(RANDOM_COMPONENT_BOUND) ^ now_ms)
    return _to_base36(first) + _to_base36(second)


def random_id(length: Optional[int] = None) -> str:
    """Псевдослучайный id; при заданной длине строка усекается."""
    s = make_random_string()
    return s[:length] if length else s


def private_random() -> Callable[[], str]:
    """Фабрика функции, всегда возвращающей один и тот же random_id."""
    value = random_id()

    def get() -> str:
        return value

    return get


def rand_int_between(min_: int = 0, max_: int = 10) -> Callable[[], int]:
    """
    Фабрика случайных целых в [min_, max_).

    Examples:
        >>> 0 <= rand_int_between(0, 3)() < 3
        True
    """
    diff = max_ - min_

    def get() -> int:
        return int(random.random() * diff + min_)

    return get


def rand_sub_set(seed: str) -> Callable[[int], str]:
    """
    Фабрика случайной подстроки длины l из символов seed без повторов.

    Каждая позиция seed используется не более одного раза.
    """

    def pick(length: int) -> str:
        picked: list[str] = []
        pool = list(seed)
        for _ in range(length):
            element, pool = remove_random(pool)
            picked = push(picked, element)
        return join("")(e for e in picked if e is not None)

    return pick


def rand_sign() -> int:
    """Случайно -1 или 1."""
    return random.choice((-1, 1))
