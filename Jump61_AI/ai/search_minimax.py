"""Depth-limited minimax with alpha-beta pruning over a single scratch board."""

import time

from . import heuristic
from ..engine.errors import PreconditionViolated
from ..engine.sides import Side

INF = float("inf")
DEFAULT_DEPTH = 4


class MinimaxSearcher:
    """Encapsulates the state and logic for one side's minimax search."""

    def __init__(self, side, depth=DEFAULT_DEPTH, stats=None):
        if side not in (Side.RED, Side.BLUE):
            raise ValueError("searcher side must be Red or Blue")
        if depth < 1:
            raise ValueError("search depth must be at least 1")
        self.side = side
        self.depth = depth
        self.stats_list = stats

        # Internal state
        self.node_counter = 0
        self.start_time = None
        self.best_value = None
        self._found_move = None

    def choose_move(self, board):
        """
        Return (row, col) of the best move for my side, searching `depth` plies.
        The caller's board is never modified.
        """
        if board.winner() is not None:
            raise PreconditionViolated("game is already decided")
        if board.side_to_move() != self.side:
            raise PreconditionViolated(f"it is not {self.side.label}'s move")

        self.start_time = time.time()
        self.node_counter = 0
        self._found_move = None

        work = board.clone()
        self.best_value = self._minimax(work, self.depth, int(self.side), -INF, INF, save_move=True)

        if self.stats_list is not None:
            self._record_stats()

        n = self._found_move
        return board.row(n), board.col(n)

    def _minimax(self, board, depth, sense, alpha, beta, save_move=False):
        """
        Return the value of BOARD searched to DEPTH plies, maximizing when
        sense is 1 and minimizing when it is -1.  Only the root call
        (save_move=True) records the move it found.
        """
        self.node_counter += 1
        if board.winner() is not None or depth == 0:
            return heuristic.evaluate(board)

        mover = Side.RED if sense == 1 else Side.BLUE
        maximizing = sense == 1
        best_score = -INF if maximizing else INF
        best_local_move = None

        for n in range(board.size * board.size):
            if not board.is_legal_move(mover, n):
                continue
            board.apply_move(mover, n)
            try:
                score = self._minimax(board, depth - 1, -sense, alpha, beta)
            finally:
                board.undo()

            if maximizing:
                if score > best_score:
                    best_score = score
                    best_local_move = n
                    alpha = max(alpha, best_score)
            else:
                if score < best_score:
                    best_score = score
                    best_local_move = n
                    beta = min(beta, best_score)

            if alpha >= beta:
                break

        if save_move:
            self._found_move = best_local_move
        return best_score

    def _record_stats(self):
        total_time = max(time.time() - self.start_time, 1e-9)
        self.stats_list.append({
            "side": self.side,
            "depth": self.depth,
            "nodes": self.node_counter,
            "time": total_time,
            "nps": self.node_counter / total_time,
        })


def choose_move(board, side, depth=DEFAULT_DEPTH, stats=None):
    """Public function to start a search. Instantiates and uses MinimaxSearcher."""
    searcher = MinimaxSearcher(side, depth=depth, stats=stats)
    return searcher.choose_move(board)
