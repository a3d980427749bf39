"""Static evaluation of jump61 positions from Red's point of view."""

from ..engine.sides import Side

# Larger than any square-count difference on a playable board.
WIN_VALUE = 10 ** 9


def evaluate(board):
    """
    Positive favors Red, negative favors Blue.
    A decided game scores +/-WIN_VALUE; otherwise the difference in squares owned.
    """
    winner = board.winner()
    if winner is Side.RED:
        return WIN_VALUE
    if winner is Side.BLUE:
        return -WIN_VALUE
    return board.count_of(Side.RED) - board.count_of(Side.BLUE)
