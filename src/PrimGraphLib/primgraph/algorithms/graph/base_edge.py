"""Ребро взвешенного графа"""

from typing import Generic, Hashable, TypeVar


V = TypeVar('V', bound=Hashable)


class Edge(Generic[V]):
    """
    Ребро взвешенного графа.

    Неизменяемое значение: соединяет вершины src и dest и имеет вес weight.
    Вершины сравниваются по значению, а не по ссылке.
    """

    __slots__ = ('_src', '_dest', '_weight')

    def __init__(self, src: V, dest: V, weight: float = 0.0):
        self._src = src
        self._dest = dest
        self._weight = weight

    @property
    def src(self) -> V:
        """Начальная вершина"""
        return self._src

    @property
    def dest(self) -> V:
        """Конечная вершина"""
        return self._dest

    @property
    def weight(self) -> float:
        """Вес ребра"""
        return self._weight

    def either(self) -> V:
        """Получить одну из вершин ребра (начальную)"""
        return self._src

    def other(self, vertex: V) -> V:
        """
        Получить другую вершину ребра.

        Args:
            vertex: Одна из вершин ребра

        Returns:
            Другая вершина
        """
        if vertex == self._src:
            return self._dest
        elif vertex == self._dest:
            return self._src
        else:
            raise ValueError(f"Вершина {vertex!r} не принадлежит ребру")

    def __iter__(self):
        return iter((self._src, self._dest, self._weight))

    def __repr__(self):
        return f"Edge({self._src!r} -> {self._dest!r}, w={self._weight})"

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return (self._src == other._src and
                self._dest == other._dest and
                self._weight == other._weight)

    def __hash__(self):
        return hash((self._src, self._dest, self._weight))
