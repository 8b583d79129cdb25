"""Взвешенный граф (ориентированный или неориентированный)"""

from typing import Dict, Generic, Hashable, Iterator, List, TypeVar

from ...exceptions import EdgeNotFoundError, InvalidArgumentError, VertexNotFoundError
from .base_edge import Edge
from .weight_table import WeightTable

V = TypeVar('V', bound=Hashable)


class Graph(Generic[V]):
    """
    Взвешенный граф с произвольными хешируемыми метками вершин.

    Вершины хранятся в словаре списков смежности, веса - в WeightTable.
    В неориентированном режиме каждое логическое ребро хранится дважды
    (src -> dest и dest -> src) с одинаковым весом, поэтому счетчики
    ребер и суммарный вес делятся пополам.
    """

    def __init__(self, oriented: bool = False):
        """
        Инициализация пустого графа.

        Args:
            oriented: True - ориентированный граф, False - неориентированный
        """
        self._adj: Dict[V, List[V]] = {}  # Списки смежности
        self._weights: WeightTable[V] = WeightTable()
        self._oriented = oriented

    def is_oriented(self) -> bool:
        """Ориентирован ли граф"""
        return self._oriented

    def is_empty(self) -> bool:
        """Нет ни одной вершины"""
        return not self._adj

    def add_vertex(self, v: V):
        """
        Добавить вершину. Повторное добавление ничего не меняет.

        Args:
            v: Метка вершины
        """
        self._adj.setdefault(v, [])

    def add_edge(self, src: V, dest: V, weight: float):
        """
        Добавить ребро между существующими вершинами.

        Уже существующее ребро не перезаписывается.

        Args:
            src: Начальная вершина
            dest: Конечная вершина
            weight: Вес ребра

        Raises:
            VertexNotFoundError: Если одной из вершин нет в графе
            InvalidArgumentError: Петля в неориентированном графе
        """
        self._require_vertex(src, "while creating edge")
        self._require_vertex(dest, "while creating edge")
        self._insert_edge(src, dest, weight)

    def add_edge_forced(self, src: V, dest: V, weight: float):
        """
        Добавить ребро, создавая недостающие вершины.

        Args:
            src: Начальная вершина
            dest: Конечная вершина
            weight: Вес ребра
        """
        self._check_loop(src, dest)
        self.add_vertex(src)
        self.add_vertex(dest)
        self._insert_edge(src, dest, weight)

    def remove_vertex(self, v: V):
        """
        Удалить вершину и все ребра, в которых она участвует.

        Raises:
            VertexNotFoundError: Если вершины нет в графе
        """
        self._require_vertex(v, "while removing it")

        for dest in self._adj.pop(v):
            self._weights.remove(v, dest)

        for src, adjs in self._adj.items():
            if v in adjs:
                adjs.remove(v)
                self._weights.remove(src, v)

    def remove_edge(self, src: V, dest: V):
        """
        Удалить ребро (и обратное ему в неориентированном графе).

        Raises:
            VertexNotFoundError: Если одной из вершин нет в графе
            EdgeNotFoundError: Если ребра нет
        """
        self._require_vertex(src, "while removing edge")
        self._require_vertex(dest, "while removing edge")
        if self._weights.get(src, dest) is None:
            raise EdgeNotFoundError(f"Edge {src!r} -> {dest!r} to be removed doesn't exist")

        self._adj[src].remove(dest)
        self._weights.remove(src, dest)
        if not self._oriented:
            self._adj[dest].remove(src)
            self._weights.remove(dest, src)

    def contains_vertex(self, v: V) -> bool:
        """Есть ли вершина в графе"""
        return v in self._adj

    def contains_edge(self, src: V, dest: V) -> bool:
        """
        Есть ли ребро src -> dest.

        Raises:
            VertexNotFoundError: Если одной из вершин нет в графе
        """
        self._require_vertex(src, "while looking up edge")
        self._require_vertex(dest, "while looking up edge")
        return self._weights.get(src, dest) is not None

    def get_edge_weight(self, src: V, dest: V) -> float:
        """
        Получить вес ребра src -> dest.

        Raises:
            VertexNotFoundError: Если одной из вершин нет в графе
            EdgeNotFoundError: Если ребра нет
        """
        self._require_vertex(src, "while looking up edge")
        self._require_vertex(dest, "while looking up edge")
        weight = self._weights.get(src, dest)
        if weight is None:
            raise EdgeNotFoundError(f"Edge {src!r} -> {dest!r} doesn't exist")
        return weight

    def get_all_vertices(self) -> List[V]:
        """Список всех вершин (копия)"""
        return list(self._adj)

    def get_vertex_adjs(self, v: V) -> List[V]:
        """
        Список смежных вершин (копия).

        Raises:
            VertexNotFoundError: Если вершины нет в графе
        """
        self._require_vertex(v, "while listing adjacencies")
        return list(self._adj[v])

    def vertex_count(self) -> int:
        """Количество вершин"""
        return len(self._adj)

    def edge_count(self) -> int:
        """Количество логических ребер"""
        count = sum(len(adjs) for adjs in self._adj.values())
        return count if self._oriented else count // 2

    def weight(self) -> float:
        """Суммарный вес всех логических ребер"""
        total = self._weights.weight
        return total if self._oriented else total / 2

    def edges(self) -> Iterator[Edge[V]]:
        """
        Перебрать ребра графа.

        В неориентированном графе каждое ребро выдается один раз.
        """
        seen = set()
        for src, adjs in self._adj.items():
            for dest in adjs:
                if not self._oriented:
                    if (dest, src) in seen:
                        continue
                    seen.add((src, dest))
                yield Edge(src, dest, self._weights.get(src, dest))

    def _insert_edge(self, src: V, dest: V, weight: float):
        self._check_loop(src, dest)
        if self._weights.get(src, dest) is not None:
            return
        self._adj[src].append(dest)
        self._weights.set(src, dest, weight)
        if not self._oriented:
            self._adj[dest].append(src)
            self._weights.set(dest, src, weight)

    def _check_loop(self, src: V, dest: V):
        # Петлю нельзя хранить двумя разными записями
        if not self._oriented and src == dest:
            raise InvalidArgumentError(
                f"Self-loop on vertex {src!r} is not supported in a not oriented graph"
            )

    def _require_vertex(self, v: V, action: str):
        if v not in self._adj:
            raise VertexNotFoundError(f"Vertex {v!r} not found {action}")

    def __contains__(self, v) -> bool:
        return v in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __str__(self):
        lines = [
            "Oriented Graph" if self._oriented else "Not Oriented Graph",
            f"Vertex count: {self.vertex_count()}",
            f"Edge count: {self.edge_count()}",
            f"Total weight: {self.weight()}",
            "Vertex list: [ " + ", ".join(str(v) for v in self._adj) + " ]",
            "Adjacencies: {",
        ]
        for src, adjs in self._adj.items():
            links = ", ".join(
                f"to {dest} in {self._weights.get(src, dest)}" for dest in adjs
            )
            lines.append(f"\t{src}: [ {links} ]")
        lines.append("}")
        return "\n".join(lines)

    def __repr__(self):
        return (f"Graph(oriented={self._oriented}, v={self.vertex_count()}, "
                f"e={self.edge_count()})")
