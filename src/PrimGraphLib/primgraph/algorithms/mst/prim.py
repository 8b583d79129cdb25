"""Алгоритм Прима для построения минимального остовного дерева"""

import logging
from typing import Dict, Generic, Hashable, TypeVar

from ... import config
from ...exceptions import (
    InvalidArgumentError,
    UnsupportedNegativeWeightError,
    UnsupportedOrientationError,
    VertexNotFoundError,
)
from ..graph.graph import Graph
from ..queue.comparators import Comparator, min_order
from ..queue.indexed_priority_queue import IndexedPriorityQueue

logger = logging.getLogger(__name__)

V = TypeVar('V', bound=Hashable)


class Prim(Generic[V]):
    """
    Алгоритм Прима для неориентированного графа с неотрицательными весами.

    Результат - новый неориентированный граф. Если исходный граф несвязный,
    получается остовный лес: каждая недостижимая компонента начинается
    со своей корневой вершины.
    """

    def __init__(
        self,
        graph: Graph[V],
        start: V,
        comparator: Comparator = min_order
    ):
        """
        Инициализация и выполнение алгоритма Прима.

        Args:
            graph: Неориентированный граф
            start: Начальная вершина
            comparator: Минимизирующий компаратор весов
                       (меньший вес извлекается первым)

        Raises:
            InvalidArgumentError: Если graph is None
            UnsupportedOrientationError: Если граф ориентированный
            VertexNotFoundError: Если начальной вершины нет в графе
            UnsupportedNegativeWeightError: Если найден отрицательный вес
        """
        if graph is None:
            raise InvalidArgumentError("Graph must be not None")
        if graph.is_oriented():
            raise UnsupportedOrientationError("Prim only works on not oriented graphs")
        if not graph.contains_vertex(start):
            raise VertexNotFoundError(f"Starting vertex {start!r} not found in graph")

        self._graph = graph
        self._start = start
        self._compare = comparator

        self._keys: Dict[V, float] = {}  # лучший известный вес подключения
        self._parents: Dict[V, V] = {}  # вершина, через которую подключена
        self._tree: Graph[V] = Graph(oriented=False)
        self._components = 0

        # Выполнить алгоритм
        self._search()

    def _search(self):
        """Построить минимальный остов"""
        vertices = self._graph.get_all_vertices()
        self._keys = {v: config.UNREACHED_WEIGHT for v in vertices}

        queue = IndexedPriorityQueue.from_arrays(
            vertices,
            [config.UNREACHED_WEIGHT] * len(vertices),
            self._compare
        )
        self._keys[self._start] = config.ROOT_WEIGHT
        queue.update_priority(self._start, config.ROOT_WEIGHT)

        while not queue.is_empty():
            u = queue.extract()

            if u not in self._parents:
                # Корень новой компоненты связности
                self._tree.add_vertex(u)
                self._keys[u] = config.ROOT_WEIGHT
                self._components += 1
                logger.debug(f"Prim: new component rooted at {u!r}")
            else:
                self._tree.add_edge_forced(u, self._parents[u], self._keys[u])

            # Релаксация соседей, еще не попавших в дерево
            for v in self._graph.get_vertex_adjs(u):
                if not queue.contains(v):
                    continue

                weight = self._graph.get_edge_weight(u, v)
                if weight < 0:
                    raise UnsupportedNegativeWeightError(
                        f"Prim only works with non negative weights, "
                        f"edge {u!r} -> {v!r} has weight {weight}"
                    )

                if self._compare(weight, self._keys[v]) > 0:
                    self._keys[v] = weight
                    queue.update_priority(v, weight)
                    self._parents[v] = u

        if self._components > 1:
            logger.warning(
                f"Prim: graph is disconnected, built a spanning forest "
                f"of {self._components} components"
            )
        logger.info(
            f"Prim finished from {self._start!r}: {self._tree.vertex_count()} vertices, "
            f"{self._tree.edge_count()} edges, total weight {self._tree.weight()}"
        )

    @property
    def tree(self) -> Graph[V]:
        """Минимальное остовное дерево (лес)"""
        return self._tree

    @property
    def parents(self) -> Dict[V, V]:
        """Родитель каждой вершины в остове (корней компонент в словаре нет)"""
        return dict(self._parents)

    @property
    def keys(self) -> Dict[V, float]:
        """Вес ребра, которым вершина подключена к остову (0 у корней)"""
        return dict(self._keys)

    @property
    def components(self) -> int:
        """Количество компонент связности в результате"""
        return self._components


def prim(
    graph: Graph[V],
    start: V,
    comparator: Comparator = min_order
) -> Graph[V]:
    """
    Построить минимальное остовное дерево (лес) алгоритмом Прима.

    Args:
        graph: Неориентированный граф с неотрицательными весами
        start: Начальная вершина
        comparator: Минимизирующий компаратор весов

    Returns:
        Новый неориентированный граф
    """
    return Prim(graph, start, comparator).tree
