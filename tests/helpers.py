"""Shared move sequences and board-inspection helpers for the test suite."""

import numpy as np

from grid4.core.engine import Engine

# 3x3: center four times freezes the center and all four edges,
# then four clicks per corner freeze the corners. 20 moves end the game.
CORNERS_3X3 = [(0, 0), (0, 2), (2, 0), (2, 2)]
FULL_GAME_3X3 = [(1, 1)] * 4 + [corner for corner in CORNERS_3X3 for _ in range(4)]


def board_state(engine: Engine):
    """Copy of everything a move can touch, for exact before/after comparison."""
    st = engine.state
    return (
        engine.board.values.copy(),
        engine.board.owners.copy(),
        st.score_pair(),
        st.current_player,
        st.game_over,
    )


def assert_same_state(a, b):
    assert np.array_equal(a[0], b[0])
    assert np.array_equal(a[1], b[1])
    assert a[2:] == b[2:]


def touched_cells(engine: Engine):
    return int(np.count_nonzero(engine.board.values))
