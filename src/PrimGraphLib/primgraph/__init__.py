"""
PrimGraph - взвешенные графы, индексированная очередь с приоритетом
и алгоритм Прима.
"""

from .algorithms.graph import Edge, Graph, WeightTable
from .algorithms.queue import IndexedPriorityQueue, QueueElement, min_order, natural_order
from .algorithms.mst import Prim, prim
from .exceptions import (
    PrimGraphError,
    InvalidArgumentError,
    VertexNotFoundError,
    EdgeNotFoundError,
    DuplicateElementError,
    ElementNotFoundError,
    EmptyQueueError,
    UnsupportedOrientationError,
    UnsupportedNegativeWeightError,
)

__version__ = "1.0.0"

__all__ = [
    'Edge', 'Graph', 'WeightTable',
    'IndexedPriorityQueue', 'QueueElement', 'min_order', 'natural_order',
    'Prim', 'prim',
    'PrimGraphError', 'InvalidArgumentError', 'VertexNotFoundError',
    'EdgeNotFoundError', 'DuplicateElementError', 'ElementNotFoundError',
    'EmptyQueueError', 'UnsupportedOrientationError',
    'UnsupportedNegativeWeightError',
]
