"""Очередь с приоритетом"""

from .queue_element import QueueElement
from .comparators import Comparator, natural_order, min_order
from .indexed_priority_queue import IndexedPriorityQueue

__all__ = ['QueueElement', 'Comparator', 'natural_order', 'min_order', 'IndexedPriorityQueue']
