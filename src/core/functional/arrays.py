"""
Arrays — Неизменяющие операции над списками

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция не изменяет входной список: результат всегда новый list
2. Операции над множествами (intersection, union, ...) сохраняют порядок
   первого появления и возвращают уникальные элементы
3. Элементы для find_shared и операций над множествами должны быть hashable
"""

import functools
import math
import random
from collections import Counter
from typing import Any, Callable, Iterable, Iterator, Sequence

from src.core.functional.predicates import is_number, same_as


class RangeArgumentError(TypeError):
    """Некорректные аргументы генератора диапазона (шаг или границы)."""

    pass


# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================


def range_gen(b: float, e: float, s: float = 1) -> Iterator[float]:
    """
    Генератор диапазона от b к e включительно.

    Знак шага игнорируется: генератор всегда движется от b в сторону e,
    независимо от того, какая граница больше. Первое значение b
    выдаётся всегда.

    Args:
        b: Начало (включительно)
        e: Конец (включительно)
        s: Размер шага (default: 1)

    Raises:
        RangeArgumentError: Шаг равен 0 или не число, границы не числа

    Examples:
        >>> list(range_gen(1, 10, 2))
        [1, 3, 5, 7, 9]
        >>> list(range_gen(3, 1))
        [3, 2, 1]
    """
    if not is_number(s) or s == 0:
        raise RangeArgumentError(f"Invalid step size: {s}")
    if not (is_number(b) and is_number(e)):
        raise RangeArgumentError(
            f"Arguments to range must be numbers, got {b!r} and {e!r}"
        )

    step = abs(s)
    up = e >= b
    i = b
    while (i <= e) if up else (i >= e):
        yield i
        i = i + step if up else i - step


def range_(b: float, e: float, s: float = 1) -> list[float]:
    """Список значений range_gen(b, e, s)."""
    return list(range_gen(b, e, s))


def range2(m: int, n: float) -> list[int]:
    """
    Диапазон [m, n] с шагом 1; пустой список, если n < m.

    Examples:
        >>> range2(1, 4)
        [1, 2, 3, 4]
        >>> range2(10, 5)
        []
    """
    length = math.floor(n - m) + 1
    return [m + i for i in range(max(length, 0))]


def i_range(n: int) -> list[int]:
    """Диапазон 0..n-1."""
    return list(range(n))


def clock(m: int) -> Callable[[int], list[int]]:
    """
    Фабрика циферблата: значения 1..m по кругу, начиная с заданного.

    Examples:
        >>> clock(12)(4)
        [4, 5, 6, 7, 8, 9, 10, 11, 12, 1, 2, 3]
    """

    def around(s: int) -> list[int]:
        return range2(s, m) + (range2(1, s - 1) if s > 1 else [])

    return around


# =============================================================================
# ДОСТУП К ЭЛЕМЕНТАМ
# =============================================================================


def head(x: Sequence[Any]) -> Any:
    return x[0] if len(x) else None


def tail(x: Sequence[Any]) -> Any:
    """Последний элемент или None для пустой последовательности."""
    return x[-1] if len(x) else None


def reverse(x: Iterable[Any]) -> list[Any]:
    """Развёрнутая копия списка или строки (строка даёт список символов)."""
    return list(x)[::-1]


def truncate(n: int) -> Callable[[Sequence[Any]], list[Any]]:
    def cut(arr: Sequence[Any]) -> list[Any]:
        return list(arr[: max(n, 0)])

    return cut


def flatten(a: Iterable[Any]) -> list[Any]:
    """
    Рекурсивное выравнивание вложенных списков и кортежей.

    Examples:
        >>> flatten([[1], 2, [[3, 4], 5], [[[]]], [[[6]]], 7, 8, []])
        [1, 2, 3, 4, 5, 6, 7, 8]
    """
    result: list[Any] = []
    for item in a:
        if isinstance(item, (list, tuple)):
            result.extend(flatten(item))
        else:
            result.append(item)
    return result


def el_at(i: int) -> Callable[[Sequence[Any]], Any]:
    """Фабрика доступа по индексу; None за пределами списка."""

    def get(arr: Sequence[Any]) -> Any:
        return arr[i] if 0 <= i < len(arr) else None

    return get


def column_at(arr: Sequence[Sequence[Any]]) -> Callable[[int], list[Any]]:
    """
    Фабрика выборки столбца из списка списков.

    Строки без элемента с нужным индексом дают None.

    Examples:
        >>> column_at([["a", "b", "c"], ["A", "B", "C"], [1, 2, 3]])(2)
        ['c', 'C', 3]
    """

    def column(i: int) -> list[Any]:
        return [el_at(i)(row) for row in arr]

    return column


def transpose(a: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Транспонирование; количество столбцов берётся из первой строки."""
    if not a:
        return []
    return [column_at(a)(i) for i in range(len(a[0]))]


def repeat(v: Any, n: int | str) -> list[Any]:
    return [v] * int(n)


# =============================================================================
# ПОДСЧЁТ И СРАВНЕНИЕ
# =============================================================================


def _is_nan(x: Any) -> bool:
    return isinstance(x, float) and math.isnan(x)


def count_ock(t: Any) -> Callable[[Sequence[Any]], int]:
    """Фабрика подсчёта вхождений t (NaN считается равным NaN)."""

    def count(arr: Sequence[Any]) -> int:
        if _is_nan(t):
            return sum(1 for e in arr if _is_nan(e))
        return sum(1 for e in arr if e == t)

    return count


def count_by_func(f: Callable[[Any], Any]) -> Callable[[Sequence[Any]], int]:
    def count(arr: Sequence[Any]) -> int:
        return sum(1 for e in arr if f(e))

    return count


def filter_at_inc(n: int) -> Callable[[Sequence[Any]], list[Any]]:
    """
    Фабрика удаления каждого n-го элемента.

    Examples:
        >>> filter_at_inc(3)([1, 2, 3, 4, 5, 6, 7])
        [1, 2, 4, 5, 7]
    """

    def drop(arr: Sequence[Any]) -> list[Any]:
        return [e for i, e in enumerate(arr) if (i + 1) % n]

    return drop


def same_arr(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Строгое сравнение: те же элементы в том же порядке."""
    return len(a) == len(b) and all(c == b[i] for i, c in enumerate(a))


def same_els(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Нестрогое сравнение: та же длина и взаимное включение элементов."""
    return (
        len(a) == len(b)
        and all(c in b for c in a)
        and all(c in a for c in b)
    )


def all_elements_equal(arr: Sequence[Any]) -> bool:
    if not arr:
        return True
    return all(map(same_as(arr[0]), arr))


def map_(func: Callable[[Any], Any]) -> Callable[[Iterable[Any]], list[Any]]:
    def apply(x: Iterable[Any]) -> list[Any]:
        return [func(e) for e in x]

    return apply


def filter_(func: Callable[[Any], Any]) -> Callable[[Iterable[Any]], list[Any]]:
    def apply(x: Iterable[Any]) -> list[Any]:
        return [e for e in x if func(e)]

    return apply


# =============================================================================
# ГРУППИРОВКА
# =============================================================================


def chunk(n: int) -> Callable[[Sequence[Any]], list[list[Any]]]:
    """
    Фабрика разбиения на части по n элементов; последняя часть может
    быть короче.

    Examples:
        >>> chunk(3)([1, 2, 3, 4, 5])
        [[1, 2, 3], [4, 5]]
    """

    def split(a: Sequence[Any]) -> list[list[Any]]:
        return [list(a[i : i + n]) for i in range(0, len(a), n)]

    return split


def pairs(arr: Sequence[Any]) -> list[list[Any]]:
    return chunk(2)(arr)


def pairs_to_map(arr: Sequence[Any]) -> dict[Any, Any]:
    """
    Чётные позиции — ключи, нечётные — значения предыдущего ключа.

    Последний ключ без значения получает None.

    Examples:
        >>> pairs_to_map(["a", 1, "b", 2, "c"])
        {'a': 1, 'b': 2, 'c': None}
    """
    return {pair[0]: pair[1] if len(pair) > 1 else None for pair in pairs(arr)}


def max_in_arr(arr: Iterable[float]) -> float:
    return max(arr, default=-math.inf)


def min_in_arr(arr: Iterable[float]) -> float:
    return min(arr, default=math.inf)


def column_reduce(
    arr: Sequence[Sequence[Any]], f: Callable[[Any, Any], Any]
) -> list[Any]:
    """
    Свёртка каждого столбца функцией f.

    Examples:
        >>> column_reduce([[1, 2, 3], [4, 5, 6]], lambda p, c: p + c)
        [5, 7, 9]
    """
    return [functools.reduce(f, column) for column in transpose(arr)]


def split_at(n: int) -> Callable[[Sequence[Any]], tuple[list[Any], list[Any]]]:
    def split(arr: Sequence[Any]) -> tuple[list[Any], list[Any]]:
        return list(arr[:n]), list(arr[n:])

    return split


def zip_(a: Sequence[Any], b: Sequence[Any]) -> list[tuple[Any, Any]]:
    """
    Попарное объединение двух списков с усечением до более короткого.

    Позиции, где элемент b ложный (0, '', None), пропускаются.

    Examples:
        >>> zip_([1, 2, 3], ["a", "b"])
        [(1, 'a'), (2, 'b')]
    """
    return [(c, b[i]) for i, c in enumerate(a) if i < len(b) and b[i]]


def zip_flat(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """zip_ в виде плоского списка: [1, 'a', 2, 'b']."""
    return flatten(zip_(a, b))


def find_shared(a: Sequence[Sequence[Any]]) -> list[Any]:
    """
    Элементы, встречающиеся больше одного раза во всех вложенных списках.

    Порядок — порядок первого появления.

    Examples:
        >>> find_shared([[0, 0, 0, 1, 2, 9], [2, 3, 3, 4, 5], [4, 6, 7, 8, 2, 9, 6, 7]])
        [0, 2, 9, 3, 4, 6, 7]
    """
    counts = Counter(flatten(a))
    return [e for e, count in counts.items() if count > 1]


def filter_only_indexes(indexes: Sequence[int]) -> Callable[[Sequence[Any]], list[Any]]:
    def keep(arr: Sequence[Any]) -> list[Any]:
        return [e for i, e in enumerate(arr) if i in indexes]

    return keep


def arr_to_map(k_a: Sequence[Any], v_a: Sequence[Any]) -> dict[Any, Any]:
    """
    Два списка в словарь: ключи из k_a, значения из v_a по индексу.

    Ключи без значения получают None; лишние значения отбрасываются.
    """
    return {k: v_a[i] if i < len(v_a) else None for i, k in enumerate(k_a)}


# =============================================================================
# УДАЛЕНИЕ И ДОБАВЛЕНИЕ
# =============================================================================


def remove(idx: int, n: int, arr: Sequence[Any]) -> tuple[list[Any], list[Any]]:
    """
    Удаление n элементов начиная с idx без изменения исходного списка.

    Отрицательный idx отсчитывается с конца.

    Returns:
        (удалённые элементы, копия списка без них)

    Examples:
        >>> remove(1, 2, [1, 2, 3, 4])
        ([2, 3], [1, 4])
    """
    copy = list(arr)
    start = max(len(copy) + idx, 0) if idx < 0 else idx
    end = start + max(n, 0)
    removed = copy[start:end]
    del copy[start:end]
    return removed, copy


def remove_at_index(i: int, arr: Sequence[Any]) -> tuple[Any, list[Any]]:
    """(элемент на позиции i или None, копия списка без него)."""
    removed, rest = remove(i, 1, arr)
    return (removed[0] if removed else None), rest


def remove_random(arr: Sequence[Any]) -> tuple[Any, list[Any]]:
    """Удаление случайного элемента: (элемент, копия без него)."""
    index = random.randrange(len(arr)) if arr else 0
    return remove_at_index(index, arr)


def push(arr: Sequence[Any], e: Any) -> list[Any]:
    """Копия списка с добавленным в конец элементом."""
    return [*arr, e]


# =============================================================================
# МНОЖЕСТВА С СОХРАНЕНИЕМ ПОРЯДКА
# =============================================================================


def _unique(arr: Iterable[Any]) -> list[Any]:
    return list(dict.fromkeys(arr))


def intersection(arr1: Iterable[Any], arr2: Iterable[Any]) -> list[Any]:
    """
    Examples:
        >>> intersection([0, 0, 0, 1, 2, 4, 9], [2, 3, 3, 4, 5])
        [2, 4]
    """
    s2 = set(arr2)
    return [e for e in _unique(arr1) if e in s2]


def difference(arr1: Iterable[Any], arr2: Iterable[Any]) -> list[Any]:
    """
    Examples:
        >>> difference([0, 0, 0, 1, 2, 4, 9], [2, 3, 3, 4, 5])
        [0, 1, 9]
    """
    s2 = set(arr2)
    return [e for e in _unique(arr1) if e not in s2]


def union(arr1: Iterable[Any], arr2: Iterable[Any]) -> list[Any]:
    """
    Examples:
        >>> union([0, 0, 0, 1, 2, 4, 9], [2, 3, 3, 4, 5])
        [0, 1, 2, 4, 9, 3, 5]
    """
    return _unique([*arr1, *arr2])


def symmetric_diff(arr1: Sequence[Any], arr2: Sequence[Any]) -> list[Any]:
    """
    Examples:
        >>> symmetric_diff([0, 1, 2, 4, 9], [2, 3, 4, 5])
        [0, 1, 9, 3, 5]
    """
    return difference(union(arr1, arr2), intersection(arr1, arr2))
