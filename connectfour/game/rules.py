"""
rules.py - Round management and Gymnasium environment for Connect Four

This module provides:
1. ConnectFourGame, which runs a round between two participants: it applies
   moves in turn order, checks the board after every placement and records
   the outcome
2. ConnectFourEnv, a gymnasium-compatible environment in which an agent
   plays against the heuristic opponent
"""

from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from connectfour.debug import debug
from connectfour.utils import ROWS, COLS, Mark, GameResult
from connectfour.game.board import Board, Move
from connectfour.game.errors import GameOverError, MoveError
from connectfour.game.players import Participant
from connectfour.ai.heuristic import choose_column
from connectfour.data.history import WinHistory


class ConnectFourGame:
    """
    Runs rounds of Connect Four between two participants.

    The first participant plays Mark.A and always opens a round. The board
    itself does not stop accepting discs after a win; this class does.
    """

    def __init__(self, participants: Sequence[Participant],
                 history: Optional[WinHistory] = None):
        """
        Initialize a new game.

        Args:
            participants: The two participants, holding marks A and B in order
            history: Optional outcome log appended to when a round ends
        """
        if len(participants) != 2:
            raise ValueError("Connect Four needs exactly two participants")
        if [p.mark for p in participants] != [Mark.A, Mark.B]:
            raise ValueError("Participants must hold marks A and B in that order")

        debug.debug("Initializing ConnectFourGame", "game")
        self.participants = list(participants)
        self.history = history
        self.board = Board()
        self.reset()

    def reset(self) -> None:
        """Start a new round with an empty board."""
        debug.debug("Starting new round", "game")
        self.board.reset()
        self.current_index = 0
        self.result = GameResult.IN_PROGRESS
        self.moves_made: List[Move] = []

    @property
    def current_participant(self) -> Participant:
        return self.participants[self.current_index]

    @property
    def opponent_mark(self) -> Mark:
        return self.participants[1 - self.current_index].mark

    @property
    def last_move(self) -> Optional[Move]:
        return self.moves_made[-1] if self.moves_made else None

    def is_game_over(self) -> bool:
        return self.result.is_game_over()

    @property
    def winner(self) -> Optional[Participant]:
        """The participant who won the round, or None."""
        mark = self.result.winner()
        if mark is None:
            return None
        return next(p for p in self.participants if p.mark == mark)

    def play_move(self, column: int) -> Move:
        """
        Drop the current participant's disc into a column.

        Raises:
            GameOverError: if the round has already ended
            InvalidColumnError, ColumnFullError: if the column is rejected;
                the turn does not pass, so the same participant tries again
        """
        if self.is_game_over():
            raise GameOverError(f"Round is over ({self.result.name})")

        participant = self.current_participant
        move = self.board.place_disc(column, participant.mark)
        self.moves_made.append(move)
        debug.debug(f"{participant.name} ({participant.mark}) played column {move.column}, "
                    f"row {move.row}", "game")

        self.result = self.board.result(participant.mark)
        if self.result.is_game_over():
            self._finish_round()
        else:
            self.current_index = 1 - self.current_index

        return move

    def play_automatic_move(self) -> Move:
        """Let an automatic participant choose and play its column."""
        participant = self.current_participant
        if not participant.is_automatic:
            raise TypeError(f"{participant.name} does not choose moves automatically")
        if self.is_game_over():
            raise GameOverError(f"Round is over ({self.result.name})")
        column = participant.choose_column(self.board, self.opponent_mark)
        return self.play_move(column)

    def _finish_round(self) -> None:
        winner = self.winner
        if winner is not None:
            debug.info(f"{winner.name} ({winner.mark}) wins after {len(self.moves_made)} moves", "game")
        else:
            debug.info("Round ends in a draw", "game")

        if self.history is None:
            return
        if winner is not None:
            self.history.record_win(winner.name)
        else:
            self.history.record_draw()

    def render(self) -> str:
        return self.board.render()


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    The agent plays Mark.A and moves first. After each agent move the
    heuristic opponent replies as Mark.B, drawing its random choices from the
    environment's seeded generator.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None):
        """
        Initialize the Connect Four environment.

        Args:
            render_mode: Mode for rendering the environment
        """
        debug.debug("Initializing ConnectFourEnv", "env")

        self.action_space = spaces.Discrete(COLS)

        # Observation space: 6x7 board with 3 possible values (0, 1, 2)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(ROWS, COLS), dtype=np.int8
        )

        self.board = Board()
        self.render_mode = render_mode
        self.agent_mark = Mark.A
        self.opponent_mark = Mark.B
        self.result = GameResult.IN_PROGRESS
        self.moves_made: List[Move] = []

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01  # Small negative reward to encourage faster wins

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to initial state.

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)

        self.board.reset()
        self.result = GameResult.IN_PROGRESS
        self.moves_made = []

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play the agent's column, then the opponent's reply.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        if self.result.is_game_over():
            raise GameOverError("Episode is over; call reset()")

        try:
            move = self.board.place_disc(action, self.agent_mark)
        except MoveError as e:
            debug.warning(f"Invalid action {action}: {e}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        self.moves_made.append(move)
        self.result = self.board.result(self.agent_mark)

        if not self.result.is_game_over():
            column = choose_column(self.board, self.opponent_mark, self.agent_mark, self.np_random)
            self.moves_made.append(self.board.place_disc(column, self.opponent_mark))
            self.result = self.board.result(self.opponent_mark)

        if self.result == GameResult.win_for(self.agent_mark):
            debug.info("Episode over: agent wins", "env")
            reward = self.reward_win
        elif self.result == GameResult.win_for(self.opponent_mark):
            debug.info("Episode over: heuristic opponent wins", "env")
            reward = self.reward_lose
        elif self.result == GameResult.DRAW:
            debug.info("Episode over: draw", "env")
            reward = self.reward_draw
        else:
            reward = self.reward_step

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, self.result.is_game_over(), False, self._get_info()

    def render(self) -> Optional[Union[str, np.ndarray]]:
        """
        Render the current state of the environment.

        Returns:
            The ASCII board for "ascii", None otherwise
        """
        if self.render_mode == "ascii":
            return self.board.render()

        if self.render_mode == "human":
            print(self.board.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.board.grid.copy()

    def _get_info(self) -> Dict:
        valid_moves = self.board.available_columns()
        winner = self.result.winner()

        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'game_result': self.result.name,
            'moves_made': len(self.moves_made),
            'last_move': self.moves_made[-1] if self.moves_made else None,
            'winning_line': self.board.get_winning_line(winner) if winner else []
        }

    def close(self):
        """Clean up resources."""
        pass
