"""Tests for GameSession: the flow a front-end drives."""

import pytest

from grid4.core.errors import InvalidConfigError, InvalidSizeError, OutOfBoundsError
from grid4.core.rules import GameConfig, PlayerConfig
from grid4.core.session import GameSession
from grid4.core.types import Player

from helpers import FULL_GAME_3X3

A = Player.PLAYER_ONE
B = Player.PLAYER_TWO


class TestTurns:

    def test_turns_alternate(self, session):
        assert session.current_player is A
        session.play(0, 0)
        assert session.current_player is B
        session.play(2, 2)
        assert session.current_player is A

    def test_claimed_cell_click_consumes_turn(self, session):
        for _ in range(4):
            session.play(1, 1)
        assert session.engine.get_cell_owner(1, 1) is B
        assert session.current_player is A
        assert session.play(1, 1) == 0
        assert session.current_player is B
        assert session.history.undo_count == 5

    def test_undo_redo_restore_turn(self, session):
        session.play(0, 0)
        session.play(0, 2)
        assert session.undo()
        assert session.current_player is B
        assert session.undo()
        assert session.current_player is A
        assert session.redo()
        assert session.current_player is B

    def test_out_of_bounds_click_is_not_recorded(self, session):
        with pytest.raises(OutOfBoundsError):
            session.play(3, 3)
        assert not session.history.can_undo()
        assert session.current_player is A


class TestGameEnd:

    def test_full_game(self, session):
        for r, c in FULL_GAME_3X3:
            session.play(r, c)
        assert session.engine.is_game_over()
        # every claiming click lands on an even move, i.e. the second player
        assert session.engine.get_score(B) == 9
        assert session.result_text() == "Player 2 wins!"

    def test_play_undo_redo_refused_after_game_over(self, session):
        for r, c in FULL_GAME_3X3:
            session.play(r, c)
        assert session.play(0, 0) == 0
        assert session.history.undo_count == len(FULL_GAME_3X3)
        assert session.undo() is False
        assert session.redo() is False

    def test_tie_text(self, session):
        assert session.result_text() == "It's a tie!"

    def test_custom_names_in_result(self):
        cfg = GameConfig(player_one=PlayerConfig(A, "Ada"), player_two=PlayerConfig(B, "Linus"))
        session = GameSession(cfg)
        for r, c in FULL_GAME_3X3:
            session.play(r, c)
        assert session.result_text() == "Linus wins!"
        assert session.player_name(A) == "Ada"


class TestRestartAndResize:

    def test_restart(self, session):
        session.play(1, 1)
        session.play(1, 1)
        session.restart()
        assert session.engine.board.values.sum() == 0
        assert session.current_player is A
        assert not session.history.can_undo()
        assert not session.history.can_redo()

    def test_change_board_size(self, session):
        session.play(1, 1)
        session.undo()
        session.change_board_size(5)
        assert session.config.board_size == 5
        assert session.engine.get_grid_size() == 5
        assert not session.history.can_redo()
        session.play(4, 4)
        assert session.engine.get_cell_value(4, 4) == 1

    def test_change_board_size_invalid(self, session):
        with pytest.raises(InvalidSizeError):
            session.change_board_size(6)
        assert session.config.board_size == 3

    def test_invalid_config_rejected(self):
        with pytest.raises(InvalidConfigError):
            GameSession(GameConfig(player_one=PlayerConfig(A, "   ")))
