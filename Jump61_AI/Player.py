"""Player interface for human or AI controllers."""

import time

from .ai import search_minimax


class Player:
    def __init__(self, side):
        self.side = side

    def next_move(self, board, deadline=None):
        """Return (row, col) for next move within time limit."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, side, input_fn=input):
        super().__init__(side)
        self.input_fn = input_fn

    def next_move(self, board, deadline=None):
        """Text-input player; raises TimeoutError if the answer comes too late."""
        if deadline is not None and deadline - time.time() <= 0:
            raise TimeoutError("Move exceeded allotted time")

        prompt = f"{self.side.label} to move, enter 'row col' (1-{board.size}): "
        raw = self.input_fn(prompt).strip()
        if deadline is not None and time.time() > deadline:
            raise TimeoutError("Move exceeded allotted time")

        try:
            r_str, c_str = raw.split()
            return int(r_str), int(c_str)
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc


class AIPlayer(Player):
    def __init__(self, side, depth=search_minimax.DEFAULT_DEPTH, stats=None):
        super().__init__(side)
        self.depth = depth
        self.stats = stats

    def next_move(self, board, deadline=None):
        # Depth is the only bound on the search; the referee checks the deadline.
        return search_minimax.choose_move(board, self.side, depth=self.depth, stats=self.stats)
