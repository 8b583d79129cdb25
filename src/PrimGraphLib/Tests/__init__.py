"""
Пакет тестов для PrimGraph.

Структура:
- test_weight_table.py - таблица весов
- test_graph.py - структура графа
- test_priority_queue.py - индексированная очередь с приоритетом
- test_prim.py - алгоритм Прима
- test_config.py - конфигурация и логирование

Запуск:
    pytest Tests/ -v
    pytest Tests/test_prim.py -v
    pytest Tests/ --cov=primgraph
"""
