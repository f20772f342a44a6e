from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional




class Player(Enum):
    PLAYER_ONE = 0 # 先手
    PLAYER_TWO = 1 # 后手


    def other(self) -> "Player":
        return Player.PLAYER_ONE if self is Player.PLAYER_TWO else Player.PLAYER_TWO

    @property
    def pid(self) -> int:
        # 棋盘 owners 数组中的编号：0 留给“无主”
        return self.value + 1

    @property
    def display_name(self) -> str:
        return f"Player {self.pid}"

    @staticmethod
    def from_pid(pid: int) -> Optional["Player"]:
        if pid == 0:
            return None
        return Player(pid - 1)




@dataclass(frozen=True)
class Move:
    r: int
    c: int




@dataclass(frozen=True)
class Cell:
    value: int
    owner: Optional[Player] = None

    @property
    def claimed(self) -> bool:
        return self.owner is not None
