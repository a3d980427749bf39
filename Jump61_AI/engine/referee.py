"""Move validation and time control for submitted moves."""

import time

from .errors import IllegalMove


def check_move(move, board, side, deadline=None):
    """
    Validate a (row, col) move against time, bounds, ownership, and turn order.
    Raises TimeoutError/IllegalMove on invalid moves.
    """
    if deadline is not None and time.time() > deadline:
        raise TimeoutError("Move exceeded allotted time")

    try:
        r, c = move
    except (TypeError, ValueError) as exc:
        raise IllegalMove(f"Malformed move: {move!r}") from exc
    if not isinstance(r, int) or not isinstance(c, int):
        raise IllegalMove(f"Malformed move: {move!r}")
    if not board.exists(r, c):
        raise IllegalMove("Move out of bounds")
    if board.winner() is not None:
        raise IllegalMove("Game is already over")
    if side != board.side_to_move():
        raise IllegalMove(f"Not {side.label}'s turn")
    if not board.is_legal_move(side, r, c):
        raise IllegalMove("Square belongs to the opponent")

    return True
