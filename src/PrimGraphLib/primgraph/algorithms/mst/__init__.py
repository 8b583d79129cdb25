"""Алгоритмы минимального остовного дерева"""

from .prim import Prim, prim

__all__ = ['Prim', 'prim']
