"""Game loop and turn management for jump61."""

from .Board import Board
from .engine import referee
from .engine.sides import Side
from .utils import timer
from .utils.logger import describe_move


class Jump61game:
    def __init__(self, board_size, move_timeout, red_player, blue_player, logger=print, renderer=None):
        self.board = Board(size=board_size)
        self.move_timeout = move_timeout
        self.players = {Side.RED: red_player, Side.BLUE: blue_player}
        self.logger = logger
        self.move_index = 0
        if renderer is not None:
            self.board.set_notifier(renderer)

    def play(self):
        """Run a single game. Returns the winning Side."""
        game_result = None
        while game_result is None:
            side = self.board.side_to_move()
            player = self.players[side]
            deadline = timer.deadline_after(self.move_timeout)

            try:
                move = player.next_move(self.board, deadline=deadline)
                referee.check_move(move, self.board, side, deadline)
                self.board.apply_move(side, *move)
            except (TimeoutError, ValueError) as exc:
                self.logger(f"Disqualification: {side.label} - {exc}")
                game_result = side.opponent()
                break

            self.move_index += 1
            self.logger(describe_move(self.move_index, side, self.board.move_string(*move)))
            game_result = self.board.winner()

        self.logger(f"Winner: {game_result.label}")
        return game_result
