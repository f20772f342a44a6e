from __future__ import annotations
import logging
from typing import List

from .commands import ReversibleMove

logger = logging.getLogger(__name__)


class History:
    """撤销/重做双栈。新落子总会清空重做栈；本身不含任何规则知识。"""

    def __init__(self):
        self.undo_stack: List[ReversibleMove] = []
        self.redo_stack: List[ReversibleMove] = []

    def execute(self, move: ReversibleMove) -> int:
        points = move.execute()
        self.undo_stack.append(move)
        self.redo_stack.clear()
        return points

    def undo(self) -> bool:
        if not self.can_undo():
            return False
        move = self.undo_stack.pop()
        move.undo()
        self.redo_stack.append(move)
        logger.debug("undo: %s", move.describe())
        return True

    def redo(self) -> bool:
        if not self.can_redo():
            return False
        move = self.redo_stack.pop()
        move.execute()
        self.undo_stack.append(move)
        logger.debug("redo: %s", move.describe())
        return True

    def can_undo(self) -> bool:
        return len(self.undo_stack) > 0

    def can_redo(self) -> bool:
        return len(self.redo_stack) > 0

    def clear(self) -> None:
        self.undo_stack.clear()
        self.redo_stack.clear()

    @property
    def undo_count(self) -> int:
        return len(self.undo_stack)

    @property
    def redo_count(self) -> int:
        return len(self.redo_stack)

    def moves(self) -> List[ReversibleMove]:
        # 自上次 clear() 以来的完整落子序列
        return self.undo_stack + self.redo_stack[::-1]
