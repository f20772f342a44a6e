from __future__ import annotations
from dataclasses import dataclass, field, replace
from numbers import Integral
from typing import Optional, Tuple

from .errors import InvalidSizeError, InvalidConfigError
from .types import Player

VALID_BOARD_SIZES: Tuple[int, ...] = (3, 5, 7)
MIN_BOARD_SIZE = 3
MAX_BOARD_SIZE = 7
MAX_CELL_VALUE = 4   # 达到即“占领”，此后该格冻结
MAX_NAME_LEN = 10

Color = Tuple[int, int, int]

DEFAULT_COLORS = {
    Player.PLAYER_ONE: (255, 100, 100),  # 红
    Player.PLAYER_TWO: (100, 150, 255),  # 蓝
}


def validate_board_size(size) -> int:
    # 奇数且在 [3,7] 内，即 3/5/7；numpy 整数也接受，bool 不算
    if isinstance(size, bool) or not isinstance(size, Integral):
        raise InvalidSizeError(size)
    size = int(size)
    if size < MIN_BOARD_SIZE or size > MAX_BOARD_SIZE or size % 2 == 0:
        raise InvalidSizeError(size)
    return size


@dataclass
class RulesConfig:
    board_size: int = 3

    def __post_init__(self):
        self.board_size = validate_board_size(self.board_size)


@dataclass
class PlayerConfig:
    """菜单层传入的玩家设置：名字与颜色。核心规则不解释这些字段。"""
    player: Player
    name: Optional[str] = None
    color: Optional[Color] = None

    def __post_init__(self):
        # 只有未传入（None）时才取默认值；显式传入的空名字/黑色原样保留
        if self.name is None:
            self.name = self.player.display_name
        if self.color is None:
            self.color = DEFAULT_COLORS[self.player]

    def is_valid(self) -> bool:
        return (
            self.name is not None
            and self.name.strip() != ""
            and len(self.name) <= MAX_NAME_LEN
            and self.color is not None
        )

    def validate(self) -> "PlayerConfig":
        if not self.is_valid():
            raise InvalidConfigError(
                f"{self.player.display_name}: name must be 1-{MAX_NAME_LEN} characters (got {self.name!r})"
            )
        return self


@dataclass
class GameConfig:
    player_one: PlayerConfig = field(default_factory=lambda: PlayerConfig(Player.PLAYER_ONE))
    player_two: PlayerConfig = field(default_factory=lambda: PlayerConfig(Player.PLAYER_TWO))
    board_size: int = 3

    def is_valid(self) -> bool:
        return (
            self.player_one.is_valid()
            and self.player_two.is_valid()
            and self.board_size in VALID_BOARD_SIZES
        )

    def validate(self) -> "GameConfig":
        self.player_one.validate()
        self.player_two.validate()
        validate_board_size(self.board_size)
        return self

    def player_config(self, player: Player) -> PlayerConfig:
        return self.player_one if player is Player.PLAYER_ONE else self.player_two

    def with_board_size(self, size: int) -> "GameConfig":
        return replace(self, board_size=validate_board_size(size))

    def rules(self) -> RulesConfig:
        return RulesConfig(board_size=self.board_size)
