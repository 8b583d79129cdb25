"""Индексированная очередь с приоритетом на двоичной куче"""

import logging
from typing import Dict, Generic, Hashable, List, Sequence, Tuple, TypeVar

from ...exceptions import (
    DuplicateElementError,
    ElementNotFoundError,
    EmptyQueueError,
    InvalidArgumentError,
)
from .comparators import Comparator
from .queue_element import QueueElement

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Hashable)
P = TypeVar('P')


class IndexedPriorityQueue(Generic[T, P]):
    """
    Очередь с приоритетом на двоичной куче с поиском элемента за O(1).

    Порядок задается компаратором: в корне лежит элемент, который
    компаратор считает наибольшим. Помимо массива кучи хранится словарь
    элемент -> индекс в массиве, благодаря чему приоритет уже стоящего
    в очереди элемента можно изменить за O(log n) (decrease/increase-key).

    Каждый элемент может присутствовать в очереди не более одного раза.
    """

    def __init__(self, comparator: Comparator):
        """
        Инициализация пустой очереди.

        Args:
            comparator: Функция (a, b) -> int над приоритетами;
                       > 0 если a должен стоять ближе к корню
        """
        self._compare = comparator
        self._heap: List[QueueElement[T, P]] = []
        self._index: Dict[T, int] = {}  # элемент -> позиция в куче

    @classmethod
    def from_arrays(
        cls,
        elements: Sequence[T],
        priorities: Sequence[P],
        comparator: Comparator
    ) -> 'IndexedPriorityQueue[T, P]':
        """
        Построить очередь из двух параллельных последовательностей за O(n).

        Args:
            elements: Элементы (без повторов)
            priorities: Приоритеты, priorities[i] относится к elements[i]
            comparator: Компаратор приоритетов

        Raises:
            InvalidArgumentError: Если длины последовательностей различаются
            DuplicateElementError: Если элементы повторяются
        """
        if len(elements) != len(priorities):
            raise InvalidArgumentError(
                f"Elements and priorities differ in length: "
                f"{len(elements)} != {len(priorities)}"
            )

        queue = cls(comparator)
        for element, priority in zip(elements, priorities):
            if element in queue._index:
                raise DuplicateElementError(f"Element {element!r} appears more than once")
            queue._index[element] = len(queue._heap)
            queue._heap.append(QueueElement(element, priority))

        # Просеивание снизу вверх, начиная с последнего внутреннего узла
        for i in range(len(queue._heap) // 2 - 1, -1, -1):
            queue._sift_down(i)

        logger.debug(f"Priority queue built from {len(queue._heap)} elements")
        return queue

    def insert(self, element: T, priority: P):
        """
        Добавить элемент.

        Raises:
            DuplicateElementError: Если элемент уже в очереди
        """
        if element in self._index:
            raise DuplicateElementError(f"Element {element!r} already in queue")
        self._heap.append(QueueElement(element, priority))
        self._index[element] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def extract(self) -> T:
        """
        Извлечь элемент из корня кучи.

        Raises:
            EmptyQueueError: Если очередь пуста
        """
        if not self._heap:
            raise EmptyQueueError("Cannot extract elements from an empty queue")

        self._swap(0, len(self._heap) - 1)
        root = self._heap.pop()
        del self._index[root.element]

        if self._heap:
            self._sift_down(0)
        return root.element

    def peek(self) -> T:
        """
        Элемент в корне кучи без извлечения.

        Raises:
            EmptyQueueError: Если очередь пуста
        """
        if not self._heap:
            raise EmptyQueueError("Cannot peek into an empty queue")
        return self._heap[0].element

    def update_priority(self, element: T, priority: P):
        """
        Изменить приоритет элемента, восстановив порядок кучи.

        Если новый приоритет "экстремальнее" старого, элемент поднимается
        к корню, иначе опускается к листьям.

        Raises:
            ElementNotFoundError: Если элемента нет в очереди
        """
        if element not in self._index:
            raise ElementNotFoundError(f"Element {element!r} not found in queue")

        i = self._index[element]
        old_priority = self._heap[i].priority
        self._heap[i] = QueueElement(element, priority)

        if self._compare(priority, old_priority) > 0:
            self._sift_up(i)
        else:
            self._sift_down(i)

    def get_priority(self, element: T) -> P:
        """
        Текущий приоритет элемента.

        Raises:
            ElementNotFoundError: Если элемента нет в очереди
        """
        if element not in self._index:
            raise ElementNotFoundError(f"Element {element!r} not found in queue")
        return self._heap[self._index[element]].priority

    def contains(self, element: T) -> bool:
        """Есть ли элемент в очереди (O(1))"""
        return element in self._index

    def is_empty(self) -> bool:
        """Пуста ли очередь"""
        return not self._heap

    @property
    def heap(self) -> Tuple[QueueElement[T, P], ...]:
        """Снимок массива кучи (для проверки и отладки)"""
        return tuple(self._heap)

    def _sift_up(self, i: int):
        while i > 0:
            parent = self._parent(i)
            if self._compare(self._heap[i].priority, self._heap[parent].priority) <= 0:
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int):
        while True:
            top = self._most_extreme(i, self._left(i), self._right(i))
            if top == i:
                break
            self._swap(i, top)
            i = top

    def _most_extreme(self, *indexes: int) -> int:
        # При равенстве побеждает первый индекс, т.е. сам узел
        best = indexes[0]
        for i in indexes[1:]:
            if self._compare(self._heap[i].priority, self._heap[best].priority) > 0:
                best = i
        return best

    @staticmethod
    def _parent(i: int) -> int:
        return (i - 1) // 2

    def _left(self, i: int) -> int:
        # Отсутствующий потомок заменяется самим узлом
        return 2 * i + 1 if 2 * i + 1 < len(self._heap) else i

    def _right(self, i: int) -> int:
        return 2 * i + 2 if 2 * i + 2 < len(self._heap) else i

    def _swap(self, i: int, j: int):
        """Единственное место, где меняется порядок массива кучи"""
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]
        self._index[self._heap[i].element] = i
        self._index[self._heap[j].element] = j

    def __contains__(self, element) -> bool:
        return element in self._index

    def __len__(self) -> int:
        return len(self._heap)

    def __str__(self):
        return "[" + ", ".join(str(qe) for qe in self._heap) + "]"

    def __repr__(self):
        return f"IndexedPriorityQueue(size={len(self._heap)})"
