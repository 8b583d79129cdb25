"""
Простой пример использования PrimGraph.

Демонстрирует:
- Построение неориентированного графа
- Поиск минимального остовного дерева алгоритмом Прима
- Вывод итоговой статистики
"""

import sys
from pathlib import Path

# Добавляем путь к библиотеке
project_root = Path(__file__).parent.parent.parent / "src" / "PrimGraphLib"
sys.path.insert(0, str(project_root))

from primgraph import Graph, min_order, prim
from primgraph.config import configure_logging


CITY_EDGES = [
    ("Londra", "New York", 5),
    ("Dubai", "Londra", 12),
    ("Parigi", "New York", 3),
    ("Roma", "Londra", 6),
    ("Roma", "Dubai", 2),
    ("Milano", "New York", 7),
    ("Manchester", "Parigi", 1),
]


def main():
    configure_logging("INFO")

    print("\n" + "=" * 70)
    print("  ПРИМЕР: МИНИМАЛЬНОЕ ОСТОВНОЕ ДЕРЕВО")
    print("=" * 70 + "\n")

    graph = Graph(oriented=False)
    for src, dest, weight in CITY_EDGES:
        graph.add_edge_forced(src, dest, weight)
    print(f"Граф создан: {graph.vertex_count()} вершин, {graph.edge_count()} ребер\n")

    mst = prim(graph, "Roma", min_order)

    print(f"Vertex count: {mst.vertex_count()}")
    print(f"Edge count: {mst.edge_count()}")
    print(f"Total weight: {mst.weight():.3f}")
    print()

    print("Ребра остова:")
    for edge in mst.edges():
        print(f"  {edge.src:<12} - {edge.dest:<12} {edge.weight}")


if __name__ == "__main__":
    main()
