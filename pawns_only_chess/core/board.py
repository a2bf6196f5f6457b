from __future__ import annotations

from typing import Iterator, List, Tuple

from .types import ALL_SQUARES, Occupant, Side, Square


class Board:
    def __init__(self) -> None:
        self._cells: List[Occupant] = [Occupant.EMPTY] * 64

    @staticmethod
    def _index(s: Square) -> int:
        return s.rank * 8 + s.file

    def occupant_at(self, s: Square) -> Occupant:
        return self._cells[self._index(s)]

    def is_empty(self, s: Square) -> bool:
        return self._cells[self._index(s)] is Occupant.EMPTY

    def place(self, s: Square, occupant: Occupant) -> None:
        if not isinstance(occupant, Occupant):
            raise ValueError(f"Not a square occupant: {occupant!r}")
        self._cells[self._index(s)] = occupant

    def add_pawn(self, side: Side, s: Square) -> None:
        if not self.is_empty(s):
            raise ValueError(f"Square {s.name} occupied")
        self.place(s, side.occupant)

    def clear(self, s: Square) -> None:
        self._cells[self._index(s)] = Occupant.EMPTY

    def iter_pawns_of(self, side: Side) -> Iterator[Square]:
        for s in ALL_SQUARES:
            if self._cells[self._index(s)] is side.occupant:
                yield s

    def pawns_of(self, side: Side) -> List[Square]:
        return list(self.iter_pawns_of(side))

    def count(self, side: Side) -> int:
        return self._cells.count(side.occupant)

    def cells(self) -> Tuple[Occupant, ...]:
        return tuple(self._cells)

    def copy(self) -> "Board":
        other = Board()
        other._cells = list(self._cells)
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells
