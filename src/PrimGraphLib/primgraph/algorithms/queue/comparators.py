"""
Компараторы приоритетов.

Компаратор - функция (a, b) -> int. Положительный результат означает,
что a "экстремальнее" b и должен стоять ближе к корню кучи.
"""

from typing import Any, Callable, TypeVar

P = TypeVar('P')

Comparator = Callable[[P, P], int]


def natural_order(a: Any, b: Any) -> int:
    """Больший приоритет извлекается первым (max-куча)"""
    return (a > b) - (a < b)


def min_order(a: Any, b: Any) -> int:
    """Меньший приоритет извлекается первым (min-куча, нужна для Прима)"""
    return (b > a) - (b < a)
