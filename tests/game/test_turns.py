"""Tests for turn resolution."""

from __future__ import annotations

import pytest

from voicegame.game.rules import Board, Outcome, Side
from voicegame.game.search import MinimaxSearch
from voicegame.game.turns import (
    InvalidPosition,
    TicTacToeGame,
    TurnOutcome,
    parse_position,
    status_message,
)


def _load(game: TicTacToeGame, text: str) -> None:
    """Put a position on the game's board through the rules."""
    for index, cell in enumerate(Board.from_string(text).snapshot()):
        if cell != " ":
            assert game._board.apply_move(index, Side(cell))


class TestParsePosition:
    """Tests for parse_position."""

    @pytest.mark.parametrize(
        ("position", "expected"),
        [("1", 0), ("5", 4), ("9", 8), (" 3 ", 2), (7, 6)],
    )
    def test_valid(self, position, expected):
        assert parse_position(position) == expected

    @pytest.mark.parametrize("position", ["0", "10", -1, 12])
    def test_out_of_range(self, position):
        with pytest.raises(InvalidPosition) as exc_info:
            parse_position(position)
        assert exc_info.value.reason == "out_of_range"

    @pytest.mark.parametrize("position", ["five", "", "4.5", True, None])
    def test_not_a_number(self, position):
        with pytest.raises(InvalidPosition) as exc_info:
            parse_position(position)
        assert exc_info.value.reason == "invalid_position"

    def test_is_value_error(self):
        """Test InvalidPosition can be caught as ValueError."""
        with pytest.raises(ValueError, match="Invalid position"):
            parse_position("x")


class TestStatusMessage:
    """Tests for status_message."""

    def test_messages(self):
        assert status_message(None) == "Your turn, say a move (1-9)."
        assert status_message(Outcome.DRAW) == "Tie game!"
        assert status_message(Outcome.X_WINS) == "X wins!"
        assert status_message(Outcome.O_WINS) == "O wins!"


class TestTurnOutcome:
    """Tests for the TurnOutcome model."""

    def test_tool_payload(self):
        """Test the payload keys sent back to the agent."""
        outcome = TurnOutcome(
            accepted=True, board=list("XXXOO    "), result=Outcome.X_WINS, human_move=2
        )
        assert outcome.board_string == "XXXOO    "
        assert outcome.to_tool_payload() == {
            "isValidMove": True,
            "board": list("XXXOO    "),
            "winner": "X",
        }

    def test_tool_payload_in_progress(self):
        outcome = TurnOutcome(accepted=True, board=list("O   X    "), human_move=4, reply_move=0)
        assert outcome.to_tool_payload()["winner"] is None

    def test_tool_payload_rejected_has_no_winner(self):
        """Test rejected moves report only validity and the board."""
        outcome = TurnOutcome(accepted=False, board=[" "] * 9, reason="occupied")
        assert outcome.to_tool_payload() == {"isValidMove": False, "board": [" "] * 9}

    def test_json_dump(self):
        """Test the model serializes result tags as plain strings."""
        outcome = TurnOutcome(accepted=True, board=list("XOXXOOOXX"), result=Outcome.DRAW)
        assert outcome.model_dump(mode="json")["result"] == "Tie"


class TestTicTacToeGame:
    """Tests for TicTacToeGame.play_human_move."""

    @pytest.fixture
    def game(self):
        """Create a fresh game."""
        return TicTacToeGame(game_id="test-game")

    def test_center_opening_gets_corner_reply(self, game):
        """Test the engine answers the center with the first corner."""
        outcome = game.play_human_move("5")
        assert outcome.accepted is True
        assert outcome.result is None
        assert outcome.human_move == 4
        assert outcome.reply_move == 0
        assert outcome.board_string == "O   X    "

    def test_corner_opening_gets_center_reply(self, game):
        """Test the engine answers a corner with the center."""
        outcome = game.play_human_move("1")
        assert outcome.accepted is True
        assert outcome.reply_move == 4
        assert outcome.board_string == "X   O    "

    def test_winning_move_ends_game_without_reply(self, game):
        """Test completing a line returns the win and no engine move."""
        _load(game, "XX.OO....")
        outcome = game.play_human_move("3")
        assert outcome.accepted is True
        assert outcome.result is Outcome.X_WINS
        assert outcome.reply_move is None
        assert outcome.board_string == "XXXOO    "

    def test_engine_win_is_reported(self, game):
        """Test the engine completes its own line when the human doesn't block."""
        _load(game, "X..OO.X..")
        outcome = game.play_human_move("8")
        assert outcome.accepted is True
        assert outcome.reply_move == 5
        assert outcome.result is Outcome.O_WINS

    def test_final_move_draw(self, game):
        """Test filling the last cell without a line is a draw."""
        _load(game, "XOXXOOOX.")
        outcome = game.play_human_move("9")
        assert outcome.accepted is True
        assert outcome.result is Outcome.DRAW
        assert outcome.reply_move is None

    @pytest.mark.parametrize("position", ["10", "0", "abc", ""])
    def test_out_of_range_rejected(self, game, position):
        """Test bad positions leave the board and result alone."""
        game.play_human_move("5")
        before = game.board
        outcome = game.play_human_move(position)
        assert outcome.accepted is False
        assert outcome.reason in {"out_of_range", "invalid_position"}
        assert outcome.result is None
        assert game.board == before
        assert outcome.board == before.snapshot()

    def test_occupied_rejected(self, game):
        """Test playing on an occupied cell is rejected."""
        game.play_human_move("5")
        before = game.board
        outcome = game.play_human_move("1")  # engine took the corner
        assert outcome.accepted is False
        assert outcome.reason == "occupied"
        assert game.board == before

    def test_moves_after_game_over_rejected(self, game):
        """Test a finished game refuses further moves."""
        _load(game, "XX.OO....")
        game.play_human_move("3")
        before = game.board
        outcome = game.play_human_move("9")
        assert outcome.accepted is False
        assert outcome.reason == "game_over"
        assert outcome.result is Outcome.X_WINS
        assert game.board == before

    def test_board_property_is_a_copy(self, game):
        """Test callers can't mutate the live board."""
        board = game.board
        board.apply_move(0, Side.O)
        assert game.board == Board()

    def test_reset(self, game):
        """Test reset starts on an empty board."""
        game.play_human_move("5")
        game.reset()
        assert game.board == Board()
        assert game.result is None

    @pytest.mark.parametrize("opening", range(1, 10))
    def test_optimal_play_draws(self, game, opening):
        """Test perfect play on both sides always ends in a draw."""
        human = MinimaxSearch()
        outcome = game.play_human_move(opening)
        while outcome.result is None:
            assert outcome.accepted is True
            choice = human.best_move(game.board, Side.X)
            outcome = game.play_human_move(choice.index + 1)
        assert outcome.result is Outcome.DRAW
