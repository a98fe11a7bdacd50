"""
Unit tests for the game state machine.
"""
import pytest
from minesweeper import GameState, InvalidStateError
from minesweeper.state import GameStateMachine


@pytest.fixture
def machine() -> GameStateMachine:
    return GameStateMachine()


class TestTransitions:
    """Test legal and illegal transitions."""

    def test_starts_not_started(self, machine: GameStateMachine) -> None:
        assert machine.state == GameState.NOT_STARTED
        assert machine.is_ended is False

    def test_start_moves_to_ongoing(self, machine: GameStateMachine) -> None:
        machine.start()
        assert machine.state == GameState.ONGOING

    def test_start_is_idempotent(self, machine: GameStateMachine) -> None:
        machine.start()
        machine.start()
        assert machine.state == GameState.ONGOING

    def test_win(self, machine: GameStateMachine) -> None:
        machine.start()
        machine.win()
        assert machine.is_won is True
        assert machine.is_ended is True

    def test_lose_records_position(self, machine: GameStateMachine) -> None:
        machine.start()
        machine.lose((2, 3))
        assert machine.is_lost is True
        assert machine.exploded_tile == (2, 3)

    def test_cannot_win_before_start(self, machine: GameStateMachine) -> None:
        with pytest.raises(InvalidStateError):
            machine.win()

    def test_cannot_start_after_end(self, machine: GameStateMachine) -> None:
        machine.start()
        machine.win()
        with pytest.raises(InvalidStateError, match="already ended"):
            machine.start()

    def test_cannot_lose_after_win(self, machine: GameStateMachine) -> None:
        machine.start()
        machine.win()
        with pytest.raises(InvalidStateError):
            machine.lose((0, 0))


class TestExplodedTile:
    """Test exploded tile access."""

    def test_unavailable_before_loss(self, machine: GameStateMachine) -> None:
        with pytest.raises(InvalidStateError, match="ended with a loss"):
            machine.exploded_tile

    def test_unavailable_after_win(self, machine: GameStateMachine) -> None:
        machine.start()
        machine.win()
        with pytest.raises(InvalidStateError):
            machine.exploded_tile


@pytest.mark.parametrize(
    "state, terminal",
    [
        (GameState.NOT_STARTED, False),
        (GameState.ONGOING, False),
        (GameState.WIN, True),
        (GameState.LOSS, True),
    ],
)
def test_terminal_states(state: GameState, terminal: bool) -> None:
    assert state.is_terminal is terminal
