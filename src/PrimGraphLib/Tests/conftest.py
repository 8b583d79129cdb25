"""
Конфигурация pytest и общие фикстуры для всех тестов.

Этот файл автоматически загружается pytest перед запуском тестов.
"""

import pytest
import sys
import random
from pathlib import Path

# Добавляем путь к модулю primgraph в sys.path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from primgraph.algorithms.graph.graph import Graph


# ==================== Маркеры тестов ====================

def pytest_configure(config):
    """Регистрация пользовательских маркеров"""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "stochastic: marks tests that use randomness"
    )


# ==================== Данные примера ====================

CITY_EDGES = [
    ("Londra", "New York", 5),
    ("Dubai", "Londra", 12),
    ("Parigi", "New York", 3),
    ("Roma", "Londra", 6),
    ("Roma", "Dubai", 2),
    ("Milano", "New York", 7),
    ("Manchester", "Parigi", 1),
]

CITIES = ["Londra", "New York", "Dubai", "Parigi", "Milano", "Manchester", "Roma"]


# ==================== Общие фикстуры ====================

@pytest.fixture
def city_edges():
    """Ребра примера с городами"""
    return list(CITY_EDGES)


@pytest.fixture
def cities_graph():
    """Неориентированный граф из семи городов без ребер"""
    graph = Graph(oriented=False)
    for city in CITIES:
        graph.add_vertex(city)
    return graph


@pytest.fixture
def connected_graph():
    """
    Связный неориентированный граф с городами.

    Минимальный остов от "Roma": 7 вершин, 6 ребер, вес 24.
    """
    graph = Graph(oriented=False)
    for src, dest, w in CITY_EDGES:
        graph.add_edge_forced(src, dest, w)
    return graph


@pytest.fixture
def oriented_connected_graph():
    """Те же ребра в ориентированном графе"""
    graph = Graph(oriented=True)
    for src, dest, w in CITY_EDGES:
        graph.add_edge_forced(src, dest, w)
    return graph


@pytest.fixture
def rng():
    """Генератор случайных чисел с фиксированным seed"""
    return random.Random(42)


# ==================== Настройки pytest ====================

def pytest_collection_modifyitems(config, items):
    """Модификация собранных тестов"""
    # Автоматически добавляем маркер "unit" к тестам без других маркеров
    for item in items:
        if not any(mark.name in ["integration", "slow", "stochastic"] for mark in item.iter_markers()):
            item.add_marker(pytest.mark.unit)


def pytest_runtest_setup(item):
    """Проверка условий перед запуском теста"""
    if "slow" in item.keywords and item.config.getoption("--fast", default=False):
        pytest.skip("skipping slow test in fast mode")


def pytest_addoption(parser):
    """Добавление пользовательских опций командной строки"""
    parser.addoption(
        "--fast",
        action="store_true",
        default=False,
        help="run only fast tests"
    )
