from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .types import Player, Move


@dataclass(frozen=True)
class MoveSnapshot:
    """落子前的最小现场：受影响格 (r, c, value, owner) + 比分/执手/终局标志。"""
    cells: Tuple[Tuple[int, int, int, Optional[Player]], ...]
    current_player: Player
    game_over: bool
    scores: Tuple[int, int]


class ReversibleMove:
    """
    一手可撤销的落子。

    execute() 每次都会先重新截取快照再落子，因此 execute → undo → execute
    得到的得分与局面与第一次完全一致；执手轮转也在 execute 内完成，
    undo 直接按快照恢复 current_player。
    """

    def __init__(self, engine, row: int, col: int, player: Player):
        self.engine = engine
        self.move = Move(row, col)
        self.player = player
        self.snapshot: Optional[MoveSnapshot] = None
        self.points_awarded = 0

    @property
    def row(self) -> int:
        return self.move.r

    @property
    def col(self) -> int:
        return self.move.c

    def _capture(self) -> MoveSnapshot:
        eng = self.engine
        cells: List[Tuple[int, int, int, Optional[Player]]] = []
        for (r, c) in eng.board.neighbors(self.row, self.col):
            cell = eng.board.get(r, c)
            cells.append((r, c, cell.value, cell.owner))
        return MoveSnapshot(
            cells=tuple(cells),
            current_player=eng.state.current_player,
            game_over=eng.state.game_over,
            scores=eng.state.score_pair(),
        )

    def execute(self) -> int:
        # 快照必须严格先于任何修改
        self.snapshot = self._capture()
        self.points_awarded = self.engine.apply_move(self.row, self.col, self.player)
        if not self.snapshot.game_over:
            self.engine.switch_turn()
        return self.points_awarded

    def undo(self) -> None:
        if self.snapshot is None:
            raise RuntimeError(f"cannot undo before execute: {self.describe()}")
        snap = self.snapshot
        for (r, c, value, owner) in snap.cells:
            self.engine.restore_cell(r, c, value, owner)
        self.engine.restore_match(snap.current_player, snap.game_over, snap.scores)

    def describe(self) -> str:
        return f"Move by {self.player.display_name} at ({self.row}, {self.col})"

    def __repr__(self) -> str:
        return f"ReversibleMove({self.row}, {self.col}, {self.player.name})"
