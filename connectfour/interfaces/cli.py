"""
cli.py - Command-line interface for playing Connect Four

This module runs a playing session in the terminal: name entry, rounds
against another human or the heuristic opponent, the win history and the
"play again" loop.
"""

import argparse
import random
import sys
from typing import Callable, List, Optional

from connectfour.debug import debug, DebugLevel
from connectfour.utils import COLS, Mark
from connectfour.game.errors import MoveError
from connectfour.ai.heuristic import find_winning_columns
from connectfour.game.players import Participant, is_valid_name
from connectfour.game.rules import ConnectFourGame
from connectfour.data.history import WinHistory, DEFAULT_HISTORY_FILE


class SimpleCLI:
    """Simple command-line interface for Connect Four sessions."""

    def __init__(self, input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        """
        Initialize the CLI.

        Args:
            input_fn: Reads one line of user input given a prompt
            output_fn: Writes one line of output
        """
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='Connect Four')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a session interactively')
        play_parser.add_argument('--ai', choices=['heuristic', 'none', 'ask'], default='ask',
                                 help='Opponent: heuristic computer player, none (two humans), '
                                      'or ask at start-up')
        play_parser.add_argument('--seed', type=int, default=None,
                                 help='Random seed for the computer player')
        play_parser.add_argument('--history', default=DEFAULT_HISTORY_FILE,
                                 help='File holding the results of past rounds')
        play_parser.add_argument('--hints', action='store_true',
                                 help='Show winning and must-block columns before each human move')
        play_parser.add_argument('--debug', action='store_true', help='Enable debug mode')
        play_parser.add_argument('--debug_level',
                                 choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
                                 default='warning', help='Logging verbosity')

        history_parser = subparsers.add_parser('history', help='Show the results of past rounds')
        history_parser.add_argument('--history', default=DEFAULT_HISTORY_FILE,
                                    help='File holding the results of past rounds')
        history_parser.add_argument('--clear', action='store_true',
                                    help='Delete all stored results')

        self.args = parser.parse_args(argv)

        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(getattr(self.args, 'debug_level', 'warning'))

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_session()
        elif self.args.command == 'history':
            self.show_history()
        else:
            self.output_fn("Please specify a command. Use --help for options.")
            return 1
        return 0

    def ask(self, prompt: str) -> str:
        """Read a line, treating end of input as a request to stop."""
        try:
            return self.input_fn(prompt).strip()
        except EOFError:
            raise KeyboardInterrupt from None

    def ask_yes_no(self, prompt: str) -> bool:
        return self.ask(prompt).lower() == 'yes'

    def ask_name(self, mark: Mark) -> str:
        """Prompt until a valid name is entered."""
        name = self.ask(f"Enter a name for Player {mark}: ")
        while not is_valid_name(name):
            self.output_fn("Invalid name. Name must be 1-20 characters and contain no special "
                           "characters. Try again: ")
            name = self.ask("")
        return name

    def build_participants(self, against_ai: bool) -> List[Participant]:
        first = Participant.human(self.ask_name(Mark.A), Mark.A)
        if against_ai:
            seed = getattr(self.args, 'seed', None)
            second = Participant.heuristic(Mark.B, rng=random.Random(seed))
        else:
            second = Participant.human(self.ask_name(Mark.B), Mark.B)
        return [first, second]

    def play_session(self) -> None:
        """Play rounds until the players decline another one."""
        history = WinHistory(getattr(self.args, 'history', None))
        history.load()

        try:
            mode = getattr(self.args, 'ai', 'ask')
            if mode == 'ask':
                against_ai = self.ask_yes_no("Play against AI? (yes/no): ")
            else:
                against_ai = mode == 'heuristic'

            game = ConnectFourGame(self.build_participants(against_ai), history)
            while True:
                self.play_round(game)
                self.display_history(history)
                if not self.ask_yes_no("\nPlay another round? (yes/no): "):
                    break
        except KeyboardInterrupt:
            self.output_fn("\nSession interrupted.")

        self.output_fn("\nThanks for playing!")

    def play_round(self, game: ConnectFourGame) -> None:
        """Play one round from an empty board to a win or a draw."""
        game.reset()

        while not game.is_game_over():
            self.output_fn("")
            self.output_fn(game.render())
            participant = game.current_participant

            if participant.is_automatic:
                move = game.play_automatic_move()
                self.output_fn(f"\n{participant.name} chooses column {move.column}")
            else:
                self.get_human_move(game)

        self.output_fn("")
        self.output_fn(game.render())
        winner = game.winner
        if winner is not None:
            self.output_fn(f"\n{winner.name} (Player {winner.mark}) wins!")
        else:
            self.output_fn("\nIt's a draw!")

    def get_human_move(self, game: ConnectFourGame) -> None:
        """Prompt the current human participant until their column is accepted."""
        participant = game.current_participant
        if getattr(self.args, 'hints', False):
            self.show_hints(game)
        raw = self.ask(f"\n{participant.name} (Player {participant.mark}), "
                       f"choose a column (0-{COLS - 1}): ")
        while True:
            try:
                game.play_move(int(raw))
                return
            except MoveError as e:
                debug.debug(f"Rejected column from {participant.name}: {e}", "cli")
            except ValueError:
                debug.debug(f"Unparseable column {raw!r}", "cli")
            raw = self.ask("Invalid move. Try again: ")

    def show_hints(self, game: ConnectFourGame) -> None:
        """Print the columns that win now and the columns the opponent would win with."""
        wins = find_winning_columns(game.board, game.current_participant.mark)
        threats = find_winning_columns(game.board, game.opponent_mark)
        if wins:
            self.output_fn(f"Hint: you can win in column(s) {wins}")
        if threats:
            self.output_fn(f"Hint: block your opponent in column(s) {threats}")

    def display_history(self, history: WinHistory) -> None:
        self.output_fn("\nWin History:")
        if not len(history):
            self.output_fn("No wins yet.")
            return
        for record in history.records:
            self.output_fn(record)

    def show_history(self) -> None:
        history = WinHistory(self.args.history)
        if self.args.clear:
            history.clear()
            self.output_fn("History cleared.")
            return
        history.load()
        self.display_history(history)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
