# ──────────────────────────────────────────────────────────────────────────────
# File: src/grid4/core/errors.py  （异常层级）
# 说明：
#   - 核心只负责“报错”，不做内部恢复；由调用方（UI / 会话层）决定如何处理。
#   - 各异常同时继承 ValueError / IndexError，便于按标准类型捕获。
# ──────────────────────────────────────────────────────────────────────────────
from __future__ import annotations


class Grid4Error(Exception):
    pass


class InvalidSizeError(Grid4Error, ValueError):
    # 棋盘尺寸须为 3/5/7
    def __init__(self, size):
        self.size = size
        super().__init__(f"Grid size must be 3, 5, or 7 (got {size})")


class OutOfBoundsError(Grid4Error, IndexError):
    def __init__(self, row: int, col: int, size: int):
        self.row = row
        self.col = col
        self.size = size
        super().__init__(
            f"Position ({row}, {col}) is out of bounds for {size}x{size} grid"
        )


class InvalidCellValueError(Grid4Error, ValueError):
    # 格值须在 [0, max] 内（撤销恢复时写入）
    def __init__(self, value: int, max_value: int):
        self.value = value
        self.max_value = max_value
        super().__init__(f"Cell value must be between 0 and {max_value} (got {value})")


class InvalidConfigError(Grid4Error, ValueError):
    # 玩家名为空或超长等
    pass
