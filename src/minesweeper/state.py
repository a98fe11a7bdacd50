"""
Game state machine.

NOT_STARTED -> ONGOING on the first uncover, then ONGOING -> WIN or
ONGOING -> LOSS. WIN and LOSS are terminal.
"""
import logging
from enum import Enum, auto
from typing import Optional

from .errors import InvalidStateError
from .grid import Position

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Possible states of the game."""

    NOT_STARTED = auto()
    ONGOING = auto()
    WIN = auto()
    LOSS = auto()

    @property
    def is_terminal(self) -> bool:
        """Check if no further moves are allowed."""
        return self in (GameState.WIN, GameState.LOSS)


class GameStateMachine:
    """Tracks the game state and the explosion site after a loss."""

    def __init__(self) -> None:
        self._state = GameState.NOT_STARTED
        self._exploded: Optional[Position] = None

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def is_ended(self) -> bool:
        """Check if the game has been won or lost."""
        return self._state.is_terminal

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._state == GameState.WIN

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._state == GameState.LOSS

    @property
    def exploded_tile(self) -> Position:
        """
        Position of the mine that ended the game.

        Raises:
            InvalidStateError: If the game has not ended with a loss.
        """
        if self._state != GameState.LOSS:
            raise InvalidStateError(
                "Cannot get exploded tile unless the game has ended with a loss"
            )
        return self._exploded

    def ensure_not_ended(self) -> None:
        """Raise InvalidStateError once the game is over."""
        if self.is_ended:
            raise InvalidStateError(
                f"The game has already ended ({self._state.name})"
            )

    def start(self) -> None:
        """Move from NOT_STARTED to ONGOING; no-op once started."""
        self.ensure_not_ended()
        if self._state == GameState.NOT_STARTED:
            self._state = GameState.ONGOING

    def win(self) -> None:
        """End the game with a win."""
        self._finish(GameState.WIN)
        logger.info("Game ended with a win")

    def lose(self, position: Position) -> None:
        """End the game with a loss at the given position."""
        self._finish(GameState.LOSS)
        self._exploded = position
        logger.info("Game ended with a loss at %s", position)

    def _finish(self, state: GameState) -> None:
        if self._state != GameState.ONGOING:
            raise InvalidStateError(
                f"Cannot move to {state.name} from {self._state.name}"
            )
        self._state = state
