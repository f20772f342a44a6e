# ──────────────────────────────────────────────────────────────────────────────
# File: src/grid4/ui/pygame_app.py  （极简可视化 UI：点击落子，显示比分/执手/终局）
# ──────────────────────────────────────────────────────────────────────────────
from __future__ import annotations
import logging
import sys
import pygame

from ..core.errors import OutOfBoundsError
from ..core.rules import GameConfig
from ..core.session import GameSession
from ..core.types import Player
from ..utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

# 颜色与UI参数
BG = (245, 245, 245)
GRID = (90, 90, 90)
BLACK = (30, 30, 30)
NEUTRAL = (200, 200, 200)
HILITE = (245, 150, 60)

CELL = 80            # 每格像素
MARGIN = 32          # 棋盘外边距
INFO_H = 110         # 顶部信息栏高度（比分、执手方等）

_SIZE_KEYS = {pygame.K_3: 3, pygame.K_5: 5, pygame.K_7: 7}


def window_size(size: int):
    # 宽度至少容纳顶栏文字
    W = max(MARGIN*2 + size*CELL, 480)
    H = INFO_H + MARGIN*2 + size*CELL
    return W, H


def rc_from_pos(pos, size):
    x, y = pos
    # 计算棋盘左上角
    board_x0 = MARGIN
    board_y0 = INFO_H + MARGIN
    if x < board_x0 or y < board_y0:
        return None
    col = int((x - board_x0) // CELL)
    row = int((y - board_y0) // CELL)
    if 0 <= row < size and 0 <= col < size:
        return row, col
    return None


def draw_board(screen, session: GameSession):
    screen.fill(BG)
    engine = session.engine
    size = engine.get_grid_size()
    cfg = session.config

    font = pygame.font.SysFont(None, 28)
    bigfont = pygame.font.SysFont(None, 34)
    cellfont = pygame.font.SysFont(None, 44)

    # 比分
    x = MARGIN
    for p in (Player.PLAYER_ONE, Player.PLAYER_TWO):
        pc = cfg.player_config(p)
        pygame.draw.rect(screen, pc.color, (x, MARGIN - 8, 16, 16))
        screen.blit(font.render(f"{pc.name}: {engine.get_score(p)}", True, BLACK), (x + 22, MARGIN - 10))
        x += 200

    # 执手方 / 终局结果
    if engine.is_game_over():
        status = f"Game over  |  {session.result_text()}"
    else:
        status = f"To Play: {session.player_name(engine.get_current_player())}"
    screen.blit(bigfont.render(status, True, BLACK), (MARGIN, INFO_H - 56))
    screen.blit(font.render("[Ctrl+Z] undo  [Ctrl+Y] redo  [R] restart  [3/5/7] size  [Esc] quit",
                            True, BLACK), (MARGIN, INFO_H - 24))

    # 棋格
    board_x0 = MARGIN
    board_y0 = INFO_H + MARGIN
    for r in range(size):
        for c in range(size):
            owner = engine.get_cell_owner(r, c)
            color = NEUTRAL if owner is None else cfg.player_config(owner).color
            rect = (board_x0 + c*CELL, board_y0 + r*CELL, CELL, CELL)
            pygame.draw.rect(screen, color, rect)
            pygame.draw.rect(screen, GRID, rect, 2)
            txt = cellfont.render(str(engine.get_cell_value(r, c)), True, BLACK)
            cx = board_x0 + c*CELL + CELL//2
            cy = board_y0 + r*CELL + CELL//2
            screen.blit(txt, txt.get_rect(center=(cx, cy)))

    # 最近一手高亮
    if session.history.can_undo():
        last = session.history.undo_stack[-1]
        rect = (board_x0 + last.col*CELL, board_y0 + last.row*CELL, CELL, CELL)
        pygame.draw.rect(screen, HILITE, rect, 4)

    pygame.display.flip()


def main():
    setup_logging("INFO")
    pygame.init()
    session = GameSession(GameConfig())

    screen = pygame.display.set_mode(window_size(session.config.board_size))
    pygame.display.set_caption("Grid4")
    clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                ctrl = event.mod & pygame.KMOD_CTRL
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    session.restart()
                elif ctrl and event.key == pygame.K_z:
                    session.undo()
                elif ctrl and event.key == pygame.K_y:
                    session.redo()
                elif event.key in _SIZE_KEYS:
                    session.change_board_size(_SIZE_KEYS[event.key])
                    screen = pygame.display.set_mode(window_size(session.config.board_size))
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                rc = rc_from_pos(event.pos, session.engine.get_grid_size())
                if rc is not None and not session.engine.is_game_over():
                    r, c = rc
                    try:
                        session.play(r, c)
                    except OutOfBoundsError as e:
                        logger.warning("ignored click: %s", e)
        draw_board(screen, session)
        clock.tick(60)

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
