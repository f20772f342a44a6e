# ──────────────────────────────────────────────────────────────────────────────
# File: src/grid4/core/engine.py
# 说明：
#   - 点击一格：该格与界内正交邻居各 +1，但值已到 4 的格子冻结、不再累加。
#   - 某格本手刚到 4 且无主 → 归当前行动方，记 1 分。
#   - 每手结束后全盘扫描，所有格均为 4 即终局。
#   - 执手轮转由 Engine 负责（switch_turn），调用方不直接改 MatchState。
# ──────────────────────────────────────────────────────────────────────────────
from __future__ import annotations
import logging
from typing import Iterable, Optional, Tuple

from .types import Player
from .state import MatchState
from .board import Board
from .rules import RulesConfig, MAX_CELL_VALUE, validate_board_size

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# 引擎主体
# ──────────────────────────────────────────────────────────────────────────────
class Engine:
    def __init__(self, board_size: int = 3, cfg: Optional[RulesConfig] = None):
        self.cfg = cfg if cfg is not None else RulesConfig(board_size=board_size)
        self.board = Board(self.cfg.board_size)
        self.state = MatchState()

    def apply_move(self, row: int, col: int, player: Player) -> int:
        """
        落一手并返回本手得分：
          - 越界 → OutOfBoundsError（先于终局判断，保证非法坐标总会报错）；
          - 已终局 → 静默返回 0，不做任何修改；
          - 否则点击格与邻居 <4 者 +1，新到 4 且无主者归 player。
        """
        cells = self.board.neighbors(row, col)

        if self.state.game_over:
            logger.debug("move (%d, %d) by %s ignored: game over", row, col, player.display_name)
            return 0

        points = 0
        for (r, c) in cells:
            points += self._increment_and_check(r, c, player)

        if points > 0:
            self.state.add_score(player, points)
            logger.info("%s claimed %d cell(s) at (%d, %d)", player.display_name, points, row, col)

        self._check_game_end()
        logger.debug("%s played (%d, %d): +%d, scores=%s",
                     player.display_name, row, col, points, self.state.score_pair())
        return points

    def switch_turn(self) -> None:
        self.state.switch_turn()

    # ──────────────────────────────────────────────────────────────────────────
    # 落子辅助
    # ──────────────────────────────────────────────────────────────────────────
    def _increment_and_check(self, r: int, c: int, player: Player) -> int:
        board = self.board
        if board.values[r, c] >= MAX_CELL_VALUE:
            return 0
        board.values[r, c] += 1
        if board.values[r, c] == MAX_CELL_VALUE and board.owners[r, c] == 0:
            board.owners[r, c] = player.pid
            return 1
        return 0

    def _check_game_end(self) -> None:
        if self.board.is_full():
            self.state.game_over = True
            w = self.state.winner()
            logger.info("game over: scores=%s, winner=%s",
                        self.state.score_pair(), "tie" if w is None else w.display_name)

    # ──────────────────────────────────────────────────────────────────────────
    # 查询（供 UI 渲染 / HUD）
    # ──────────────────────────────────────────────────────────────────────────
    def get_grid_size(self) -> int:
        return self.board.size

    def get_cell_value(self, row: int, col: int) -> int:
        return self.board.get(row, col).value

    def get_cell_owner(self, row: int, col: int) -> Optional[Player]:
        return self.board.get(row, col).owner

    def is_game_over(self) -> bool:
        return self.state.game_over

    def get_score(self, player: Player) -> int:
        return self.state.score(player)

    def get_current_player(self) -> Player:
        return self.state.current_player

    def winner(self) -> Optional[Player]:
        return self.state.winner()

    # ──────────────────────────────────────────────────────────────────────────
    # 撤销恢复（仅 ReversibleMove.undo 使用）
    # ──────────────────────────────────────────────────────────────────────────
    def restore_cell(self, row: int, col: int, value: int, owner: Optional[Player]) -> None:
        self.board.set(row, col, value, owner)

    def restore_match(self, current_player: Player, game_over: bool, scores: Iterable[int]) -> None:
        one, two = scores
        self.state.set_score(Player.PLAYER_ONE, one)
        self.state.set_score(Player.PLAYER_TWO, two)
        self.state.current_player = current_player
        self.state.game_over = game_over

    # ──────────────────────────────────────────────────────────────────────────
    # 重开 / 改尺寸
    # ──────────────────────────────────────────────────────────────────────────
    def reset_board(self) -> None:
        self.board.clear()
        self.state.reset()
        logger.debug("board reset (%dx%d)", self.board.size, self.board.size)

    def change_board_size(self, new_size: int) -> None:
        """替换为新尺寸的空棋盘并重置比分；History 由调用方清空。"""
        new_size = validate_board_size(new_size)
        self.cfg = RulesConfig(board_size=new_size)
        self.board = Board(new_size)
        self.state.reset()
        logger.info("board size changed to %dx%d", new_size, new_size)

    def snapshot(self) -> Tuple[Board, MatchState]:
        # 深拷贝，便于比较/调试
        return self.board.clone(), self.state.copy()
