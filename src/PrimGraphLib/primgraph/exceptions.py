"""
Исключения библиотеки PrimGraph.

Каждое исключение наследуется от PrimGraphError и от ближайшего
встроенного типа, поэтому код, перехватывающий ValueError / LookupError,
продолжает работать.
"""


class PrimGraphError(Exception):
    """Базовое исключение библиотеки"""
    pass


class InvalidArgumentError(PrimGraphError, ValueError):
    """Структурно непригодный аргумент (например, граф None)"""
    pass


class VertexNotFoundError(PrimGraphError, LookupError):
    """Вершина отсутствует в графе"""
    pass


class EdgeNotFoundError(PrimGraphError, LookupError):
    """Ребро отсутствует в графе"""
    pass


class DuplicateElementError(PrimGraphError, ValueError):
    """Элемент уже находится в очереди"""
    pass


class ElementNotFoundError(PrimGraphError, LookupError):
    """Элемент отсутствует в очереди"""
    pass


class EmptyQueueError(PrimGraphError, IndexError):
    """Извлечение из пустой очереди"""
    pass


class UnsupportedOrientationError(PrimGraphError, ValueError):
    """Алгоритм не работает с графом данной ориентации"""
    pass


class UnsupportedNegativeWeightError(PrimGraphError, ValueError):
    """Алгоритм не работает с отрицательными весами"""
    pass
