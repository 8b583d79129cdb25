"""Модуль алгоритмов - графы, очереди с приоритетом и остовные деревья"""

from . import graph
from . import queue
from . import mst

__all__ = ['graph', 'queue', 'mst']
