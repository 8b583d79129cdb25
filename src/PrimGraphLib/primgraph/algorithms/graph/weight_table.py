"""Разреженная таблица весов ребер"""

from typing import Dict, Generic, Hashable, Iterator, Optional, Tuple, TypeVar


V = TypeVar('V', bound=Hashable)


class WeightTable(Generic[V]):
    """
    Разреженная таблица весов: (строка, столбец) -> вес.

    Вместе с ячейками хранится суммарный вес. Он всегда равен сумме
    всех ячеек: каждая операция set/remove обновляет его сразу.
    """

    def __init__(self):
        self._table: Dict[V, Dict[V, float]] = {}
        self._weight = 0.0

    @property
    def weight(self) -> float:
        """Сумма весов всех ячеек"""
        return self._weight

    def set(self, r: V, c: V, val: float):
        """
        Записать вес ячейки (вставка или замена).

        Суммарный вес меняется на разницу между новым и старым значением.

        Args:
            r: Метка строки
            c: Метка столбца
            val: Вес
        """
        row = self._table.setdefault(r, {})
        previous = row.get(c)
        row[c] = val
        self._weight += val if previous is None else val - previous

    def get(self, r: V, c: V) -> Optional[float]:
        """
        Получить вес ячейки.

        Returns:
            Вес или None, если ячейки (или всей строки) нет
        """
        row = self._table.get(r)
        if row is None:
            return None
        return row.get(c)

    def remove(self, r: V, c: V):
        """
        Удалить ячейку и вычесть ее вес из суммы.

        Удаление отсутствующей ячейки ничего не делает.
        """
        row = self._table.get(r)
        if row is None or c not in row:
            return
        self._weight -= row.pop(c)
        if not row:
            del self._table[r]

    def cells(self) -> Iterator[Tuple[V, V, float]]:
        """Перебрать все ячейки как тройки (строка, столбец, вес)"""
        for r, row in self._table.items():
            for c, val in row.items():
                yield r, c, val

    def __contains__(self, key) -> bool:
        r, c = key
        return self.get(r, c) is not None

    def __len__(self) -> int:
        return sum(len(row) for row in self._table.values())

    def __str__(self):
        lines = []
        for r, row in self._table.items():
            lines.append("".join(f"<{r}, {c}, {val}>" for c, val in row.items()))
        return "\n".join(lines)

    def __repr__(self):
        return f"WeightTable(cells={len(self)}, weight={self._weight})"
