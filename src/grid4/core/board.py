# ──────────────────────────────────────────────────────────────────────────────
# File: src/grid4/core/board.py
# ──────────────────────────────────────────────────────────────────────────────
from __future__ import annotations
from dataclasses import dataclass, field
import numpy as np
from typing import Optional, List, Tuple

from .errors import OutOfBoundsError, InvalidCellValueError
from .rules import validate_board_size, MAX_CELL_VALUE
from .types import Cell, Player

# 上、下、左、右
_ORTHO = [(-1, 0), (1, 0), (0, -1), (0, 1)]


@dataclass
class Board:
    size: int
    # 每格数值 0..4
    values: np.ndarray = field(init=False)
    # 0=无主, 1=PLAYER_ONE, 2=PLAYER_TWO
    owners: np.ndarray = field(init=False)

    def __post_init__(self):
        self.size = validate_board_size(self.size)
        self.values = np.zeros((self.size, self.size), dtype=np.uint8)
        self.owners = np.zeros((self.size, self.size), dtype=np.uint8)

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.size and 0 <= c < self.size

    def check_bounds(self, r: int, c: int) -> None:
        if not self.in_bounds(r, c):
            raise OutOfBoundsError(r, c, self.size)

    def get(self, r: int, c: int) -> Cell:
        self.check_bounds(r, c)
        return Cell(int(self.values[r, c]), Player.from_pid(int(self.owners[r, c])))

    def set(self, r: int, c: int, value: int, owner: Optional[Player]) -> None:
        self.check_bounds(r, c)
        if value < 0 or value > MAX_CELL_VALUE:
            raise InvalidCellValueError(value, MAX_CELL_VALUE)
        self.values[r, c] = value
        self.owners[r, c] = 0 if owner is None else owner.pid

    def neighbors(self, r: int, c: int) -> List[Tuple[int, int]]:
        """点击格本身 + 界内的正交邻居（角 3 格、边 4 格、内部 5 格）。"""
        self.check_bounds(r, c)
        cells = [(r, c)]
        for dr, dc in _ORTHO:
            nr, nc = r + dr, c + dc
            if self.in_bounds(nr, nc):
                cells.append((nr, nc))
        return cells

    def is_full(self) -> bool:
        return bool(np.all(self.values == MAX_CELL_VALUE))

    def claimed_count(self) -> int:
        return int(np.count_nonzero(self.owners))

    def clear(self) -> None:
        self.values[:] = 0
        self.owners[:] = 0

    def clone(self) -> "Board":
        b = Board(self.size)
        b.values = self.values.copy()
        b.owners = self.owners.copy()
        return b
