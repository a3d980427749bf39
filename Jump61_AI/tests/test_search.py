"""Search-level tests: winning moves, determinism, and pruning equivalence."""

import pytest

from Jump61_AI.Board import Board
from Jump61_AI.ai import heuristic, search_minimax
from Jump61_AI.engine.errors import PreconditionViolated
from Jump61_AI.engine.sides import Side


def plain_minimax(board, depth, sense):
    """Unpruned reference search over the same tree."""
    if board.winner() is not None or depth == 0:
        return heuristic.evaluate(board)
    mover = Side.RED if sense == 1 else Side.BLUE
    values = []
    for n in range(board.size * board.size):
        if board.is_legal_move(mover, n):
            board.apply_move(mover, n)
            values.append(plain_minimax(board, depth - 1, -sense))
            board.undo()
    return max(values) if sense == 1 else min(values)


def one_move_from_sweep(owner, other):
    """3x3 board owned by OWNER except (3, 3); OWNER wins by playing (2, 3)."""
    b = Board(3)
    for n in range(9):
        b.set_square(b.row(n), b.col(n), 1, owner)
    b.set_square(2, 3, 3, owner)
    b.set_square(3, 3, 1, other)
    if b.side_to_move() is not owner:
        b.set_square(1, 1, 2, owner)
    return b


def test_minimax_prefers_immediate_win_and_does_not_mutate_board():
    b = one_move_from_sweep(Side.RED, Side.BLUE)
    before = b.clone()

    searcher = search_minimax.MinimaxSearcher(Side.RED, depth=2)
    mv = searcher.choose_move(b)

    assert mv == (2, 3)
    assert searcher.best_value == heuristic.WIN_VALUE
    assert b == before
    assert b.history == []


def test_minimizing_side_finds_its_win():
    b = one_move_from_sweep(Side.BLUE, Side.RED)
    assert b.side_to_move() is Side.BLUE

    searcher = search_minimax.MinimaxSearcher(Side.BLUE, depth=1)
    assert searcher.choose_move(b) == (2, 3)
    assert searcher.best_value == -heuristic.WIN_VALUE


def test_search_keeps_history_of_callers_board():
    b = Board(3)
    b.apply_move(Side.RED, 1, 1)
    b.apply_move(Side.BLUE, 3, 3)
    history = list(b.history)

    mv = search_minimax.choose_move(b, Side.RED, depth=3)

    assert b.history == history
    assert b.move_count == 2
    assert b.is_legal_move(Side.RED, *mv)


def test_search_is_deterministic():
    b1 = Board(4)
    b2 = Board(4)
    for board in (b1, b2):
        board.apply_move(Side.RED, 2, 2)
        board.apply_move(Side.BLUE, 3, 3)
    assert search_minimax.choose_move(b1, Side.RED, depth=3) == search_minimax.choose_move(b2, Side.RED, depth=3)


def test_ties_go_to_first_square_in_order():
    # Every opening on a fresh board is worth the same at depth 1.
    assert search_minimax.choose_move(Board(3), Side.RED, depth=1) == (1, 1)


@pytest.mark.parametrize(
    "size, moves, depth",
    [
        (3, [], 3),
        (3, [(Side.RED, 1, 1), (Side.BLUE, 3, 3), (Side.RED, 2, 2)], 3),
        (3, [(Side.RED, 1, 1), (Side.BLUE, 3, 3), (Side.RED, 1, 1)], 4),
        (2, [(Side.RED, 1, 1)], 4),
        (4, [(Side.RED, 1, 1), (Side.BLUE, 4, 4)], 2),
    ],
)
def test_alpha_beta_matches_unpruned_minimax(size, moves, depth):
    b = Board(size)
    for side, r, c in moves:
        b.apply_move(side, r, c)
    side = b.side_to_move()
    sense = int(side)

    searcher = search_minimax.MinimaxSearcher(side, depth=depth)
    mv = searcher.choose_move(b)

    assert searcher.best_value == plain_minimax(b.clone(), depth, sense)
    # The chosen move itself achieves the root value.
    b.apply_move(side, *mv)
    assert plain_minimax(b, depth - 1, -sense) == searcher.best_value


def test_stats_recorded_per_search():
    stats = []
    b = Board(3)
    search_minimax.choose_move(b, Side.RED, depth=2, stats=stats)
    assert len(stats) == 1
    assert stats[0]["side"] is Side.RED
    assert stats[0]["depth"] == 2
    assert stats[0]["nodes"] > 1


def test_search_rejects_decided_board():
    b = Board(2)
    for side, r, c in [(Side.RED, 1, 1), (Side.BLUE, 2, 2), (Side.RED, 1, 1), (Side.BLUE, 2, 2)]:
        b.apply_move(side, r, c)
    assert b.winner() is Side.BLUE
    with pytest.raises(PreconditionViolated):
        search_minimax.choose_move(b, b.side_to_move(), depth=2)


def test_search_rejects_wrong_side():
    with pytest.raises(PreconditionViolated):
        search_minimax.choose_move(Board(3), Side.BLUE, depth=2)


def test_searcher_rejects_bad_parameters():
    with pytest.raises(ValueError):
        search_minimax.MinimaxSearcher(Side.NEUTRAL)
    with pytest.raises(ValueError):
        search_minimax.MinimaxSearcher(Side.RED, depth=0)
