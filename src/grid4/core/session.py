from __future__ import annotations
import logging
from typing import Optional

from .commands import ReversibleMove
from .engine import Engine
from .history import History
from .rules import GameConfig
from .types import Player

logger = logging.getLogger(__name__)


class GameSession:
    """
    一局游戏 = Engine + History + GameConfig。UI 只和这里打交道：
      - play：当前执手方点击一格（点已占领的格也算一手，照常轮转）；
      - undo / redo：终局后不再允许；
      - restart / change_board_size：重置引擎并清空历史。
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = (config if config is not None else GameConfig()).validate()
        self.engine = Engine(self.config.board_size)
        self.history = History()

    @property
    def current_player(self) -> Player:
        return self.engine.get_current_player()

    def play(self, row: int, col: int) -> int:
        if self.engine.is_game_over():
            return 0
        move = ReversibleMove(self.engine, row, col, self.current_player)
        return self.history.execute(move)

    def undo(self) -> bool:
        if self.engine.is_game_over():
            return False
        return self.history.undo()

    def redo(self) -> bool:
        if self.engine.is_game_over():
            return False
        return self.history.redo()

    def restart(self) -> None:
        self.engine.reset_board()
        self.history.clear()
        logger.info("game restarted")

    def change_board_size(self, size: int) -> None:
        self.config = self.config.with_board_size(size)
        self.engine.change_board_size(size)
        self.history.clear()

    # 显示辅助
    def player_name(self, player: Player) -> str:
        return self.config.player_config(player).name

    def result_text(self) -> str:
        w = self.engine.winner()
        if w is None:
            return "It's a tie!"
        return f"{self.player_name(w)} wins!"
