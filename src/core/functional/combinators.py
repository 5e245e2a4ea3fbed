"""
Combinators — Композиция функций и константные функции

Строительные блоки для point-free стиля: compose, partial, identity,
константные функции и trace для отладки цепочек.
"""

import functools
from typing import Any, Callable

from src.infrastructure.logging import get_trace_logger


def identity(e: Any) -> Any:
    return e


def compose(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """
    Композиция функций справа налево.

    Самая правая функция получает все аргументы вызова, остальные
    получают результат предыдущей.

    Args:
        *fns: Функции f, g, h

    Returns:
        Функция x → f(g(h(x)))

    Examples:
        >>> compose(str.upper, str.strip)("  hi ")
        'HI'
    """
    if not fns:
        return identity
    *outer, innermost = fns

    def composed(*args: Any, **kwargs: Any) -> Any:
        result = innermost(*args, **kwargs)
        for fn in reversed(outer):
            result = fn(result)
        return result

    return composed


def partial(fn: Callable[..., Any], *args: Any) -> Callable[..., Any]:
    """
    Частичное применение позиционных аргументов.

    Examples:
        >>> partial(pow, 2)(10)
        1024
    """
    return functools.partial(fn, *args)


# =============================================================================
# КОНСТАНТНЫЕ ФУНКЦИИ
# =============================================================================


def always_undef(*args: Any) -> None:
    return None


def always_null(*args: Any) -> None:
    return None


def always_false(*args: Any) -> bool:
    return False


def always_true(*args: Any) -> bool:
    return True


def maybe_func(func: Any) -> Callable[[], Any]:
    """Обёртка: вызывает func, если это callable, иначе возвращает None."""

    def call() -> Any:
        if callable(func):
            return func()
        return None

    return call


# =============================================================================
# ОТЛАДКА
# =============================================================================


def log_inline(tag: str, x: Any) -> Any:
    """
    Вывести tag и значение в консоль и вернуть значение без изменений.

    Examples:
        >>> compose(len, trace("stripped:"), str.strip)("  abc ")
        stripped: abc
        3
    """
    get_trace_logger().info("%s %s", tag, x)
    return x


def trace(tag: str) -> Callable[[Any], Any]:
    """Фабрика log_inline с зафиксированным tag."""
    return partial(log_inline, tag)
