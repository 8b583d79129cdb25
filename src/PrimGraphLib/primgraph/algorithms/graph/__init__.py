"""Базовые структуры графа"""

from .base_edge import Edge
from .weight_table import WeightTable
from .graph import Graph

__all__ = ['Edge', 'WeightTable', 'Graph']
