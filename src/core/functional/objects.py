"""
Objects — Операции над вложенными словарями

Словари не изменяются: все функции возвращают новые объекты.
"""

from typing import Any, Callable, Mapping, Optional, Sequence

from src.core.functional.predicates import is_array, is_object

_MISSING = object()


def merge_deep(left: Any, right: Any) -> dict[str, Any]:
    """
    Глубокое слияние двух словарей.

    Правила для каждого ключа right:
    - dict в обоих: рекурсивное слияние
    - list в обоих: конкатенация left + right
    - иначе: значение из right

    Examples:
        >>> merge_deep({"a": [1], "b": {"c": 1}}, {"a": [2], "b": {"d": 2}})
        {'a': [1, 2], 'b': {'c': 1, 'd': 2}}
    """
    output: dict[str, Any] = dict(left) if is_object(left) else {}
    if not (is_object(left) and is_object(right)):
        return output

    for key, value in right.items():
        if is_object(value):
            nested = left.get(key)
            output[key] = merge_deep(nested, value) if is_object(nested) else value
        elif is_array(left.get(key)) and is_array(value):
            output[key] = [*left[key], *value]
        else:
            output[key] = value
    return output


def _as_index(key: Any) -> Optional[int]:
    if isinstance(key, int) and not isinstance(key, bool):
        return key
    if isinstance(key, str) and key.isdecimal():
        if key == "0" or not key.startswith("0"):
            return int(key)
    return None


def _step(node: Any, key: Any) -> Any:
    if isinstance(node, Mapping):
        if key in node:
            return node[key]
        index = _as_index(key)
        return node.get(index, _MISSING) if index is not None else _MISSING

    if isinstance(node, Sequence):
        index = _as_index(key)
        if index is not None and 0 <= index < len(node):
            return node[index]
    return _MISSING


def path_or(fallback: Any, path: Sequence[Any]) -> Callable[[Any], Any]:
    """
    Фабрика безопасного доступа по пути во вложенной структуре.

    Числовые строки в пути ('0', '12') используются как индексы списков.
    Найденное значение возвращается как есть, даже если оно ложное
    (False, 0, None); fallback возвращается только при отсутствии пути.

    Args:
        fallback: Значение при отсутствии пути
        path: Последовательность ключей и индексов

    Examples:
        >>> path_or("x", ["a", "1", "b"])({"a": [{}, {"b": False}]})
        False
        >>> path_or("x", ["a", "5"])({"a": []})
        'x'
    """

    def get(e: Any) -> Any:
        node = e
        for key in path:
            node = _step(node, key)
            if node is _MISSING:
                return fallback
        return node

    return get


def clone_obj(o: Mapping[str, Any]) -> dict[str, Any]:
    """Поверхностная копия словаря."""
    return dict(o)


def obj_to_paths(
    obj: Mapping[str, Any],
    path: Optional[list[str]] = None,
) -> list[tuple[list[str], Any]]:
    """
    Выравнивание вложенного словаря в список (путь, значение) для листьев.

    Examples:
        >>> obj_to_paths({"a": 1, "c": {"d": 4}})
        [(['a'], 1), (['c', 'd'], 4)]
    """
    prefix = path or []
    result: list[tuple[list[str], Any]] = []
    for key, value in obj.items():
        if is_object(value):
            result.extend(obj_to_paths(value, [*prefix, key]))
        else:
            result.append(([*prefix, key], value))
    return result


def visit_obj_deep(
    obj: Mapping[str, Any], func: Callable[[Any], Any]
) -> dict[str, Any]:
    """Копия словаря, в которой каждый лист заменён на func(лист)."""
    return {
        key: visit_obj_deep(value, func) if is_object(value) else func(value)
        for key, value in obj.items()
    }
