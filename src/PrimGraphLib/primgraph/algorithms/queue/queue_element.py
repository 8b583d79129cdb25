"""Элемент очереди с приоритетом"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar('T')
P = TypeVar('P')


@dataclass(frozen=True)
class QueueElement(Generic[T, P]):
    """Пара (элемент, приоритет) в куче очереди"""

    element: T
    priority: P

    def __str__(self):
        return f"<{self.element}, {self.priority}>"
