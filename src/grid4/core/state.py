from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple
import numpy as np

from .types import Player


@dataclass
class MatchState:
    """比分 / 执手方 / 终局标志。只应通过 Engine 修改。"""
    current_player: Player = Player.PLAYER_ONE
    game_over: bool = False

    # 索引 = Player.value
    scores: np.ndarray = field(default_factory=lambda: np.zeros(2, dtype=np.int32))

    def score(self, player: Player) -> int:
        return int(self.scores[player.value])

    def add_score(self, player: Player, points: int) -> None:
        if points < 0:
            raise ValueError(f"points must be non-negative (got {points})")
        self.scores[player.value] += points

    def set_score(self, player: Player, points: int) -> None:
        # 仅用于撤销时恢复
        if points < 0:
            raise ValueError(f"points must be non-negative (got {points})")
        self.scores[player.value] = points

    def switch_turn(self) -> None:
        self.current_player = self.current_player.other()

    # 胜者按比分即时推导，从不单独保存
    def winner(self) -> Optional[Player]:
        """Higher scorer, or None on a tie."""
        one, two = self.score(Player.PLAYER_ONE), self.score(Player.PLAYER_TWO)
        if one > two:
            return Player.PLAYER_ONE
        if two > one:
            return Player.PLAYER_TWO
        return None

    def is_tie(self) -> bool:
        return self.winner() is None

    def score_pair(self) -> Tuple[int, int]:
        return (self.score(Player.PLAYER_ONE), self.score(Player.PLAYER_TWO))

    def reset(self) -> None:
        self.scores[:] = 0
        self.current_player = Player.PLAYER_ONE
        self.game_over = False

    def copy(self) -> "MatchState":
        return MatchState(
            current_player=self.current_player,
            game_over=self.game_over,
            scores=self.scores.copy(),
        )
