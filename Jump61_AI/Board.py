"""Board state, cascading jumps, win detection, and undo history."""

from .engine.errors import IllegalMove, NothingToUndo
from .engine.sides import EMPTY_CELL, Cell, Side


def _nop(board):
    pass


class Board:
    """An N x N jump61 board.

    Squares are addressed either by 1-based (row, col) or by square number
    n = (row - 1) * size + (col - 1), i.e. row-major order.  Whose move it is
    is derived from the spot total, never stored.
    """

    def __init__(self, size=6):
        if size < 2:
            raise ValueError("board size must be at least 2")
        self._notifier = _nop
        self._reset(size)

    def _reset(self, size):
        self.size = size
        self.cells = [EMPTY_CELL] * (size * size)
        self._counts = {Side.NEUTRAL: size * size, Side.RED: 0, Side.BLUE: 0}
        self._base = tuple(self.cells)
        self.history = []
        self.move_count = 0

    # ---- lineage -------------------------------------------------------

    def clone(self):
        """Return a new board with my contents but no history or notifier."""
        new_board = Board(self.size)
        new_board.copy(self)
        return new_board

    def copy(self, board):
        """Copy the contents of BOARD (same size) into me and clear my history."""
        if board.size != self.size:
            raise ValueError("cannot copy a board of a different size")
        self._restore(board.cells)
        self._base = tuple(self.cells)
        self.history = []
        self.move_count = 0
        self._announce()

    def clear(self, size):
        """Reinitialize to an all-neutral board with SIZE squares on a side."""
        if size < 2:
            raise ValueError("board size must be at least 2")
        self._reset(size)
        self._announce()

    def _restore(self, cells):
        self.cells = list(cells)
        self._counts = {Side.NEUTRAL: 0, Side.RED: 0, Side.BLUE: 0}
        for cell in self.cells:
            self._counts[cell.side] += 1

    # ---- addressing ----------------------------------------------------

    def exists(self, r, c=None):
        if c is None:
            return 0 <= r < self.size * self.size
        return 1 <= r <= self.size and 1 <= c <= self.size

    def row(self, n):
        return n // self.size + 1

    def col(self, n):
        return n % self.size + 1

    def sq_num(self, r, c):
        return (c - 1) + (r - 1) * self.size

    def _index(self, r, c):
        return r if c is None else self.sq_num(r, c)

    def move_string(self, r, c=None):
        if c is None:
            r, c = self.row(r), self.col(r)
        return f"{r} {c}"

    def neighbors(self, r, c=None):
        """Number of orthogonal neighbors, which is also the square's capacity."""
        if c is None:
            r, c = self.row(r), self.col(r)
        n = 0
        if r > 1:
            n += 1
        if c > 1:
            n += 1
        if r < self.size:
            n += 1
        if c < self.size:
            n += 1
        return n

    # ---- queries -------------------------------------------------------

    def cell_at(self, r, c=None):
        return self.cells[self._index(r, c)]

    def total_spots(self):
        return sum(cell.spots for cell in self.cells)

    def side_to_move(self):
        """Red if (spots + size) is even, else Blue; the loser once the game is won."""
        return Side.RED if (self.total_spots() + self.size) % 2 == 0 else Side.BLUE

    def count_of(self, side):
        return self._counts[side]

    def winner(self):
        """Return the side owning every square, or None while the game is open."""
        total = self.size * self.size
        if self._counts[Side.RED] == total:
            return Side.RED
        if self._counts[Side.BLUE] == total:
            return Side.BLUE
        return None

    def is_legal_move(self, side, r, c=None):
        if not self.exists(r, c):
            return False
        if self.winner() is not None or side != self.side_to_move():
            return False
        owner = self.cell_at(r, c).side
        return owner == Side.NEUTRAL or owner == side

    # ---- mutation ------------------------------------------------------

    def apply_move(self, side, r, c=None):
        """Add a spot for SIDE, resolve all jumps, and record the move for undo."""
        if not self.is_legal_move(side, r, c):
            raise IllegalMove(f"{side.label} may not play {self._describe(r, c)}")
        n = self._index(r, c)
        self._internal_set(n, self.cells[n].spots + 1, side)
        if self.cells[n].spots > self.neighbors(n) and self.winner() is None:
            self._jump(n)
        self._mark_undo()
        self._announce()

    def _describe(self, r, c):
        if self.exists(r, c):
            return self.move_string(r, c)
        return f"({r}, {c})" if c is not None else f"square {r}"

    def _jump(self, start):
        """Resolve all discharges, assuming START is the only over-full square.

        Neighbors are visited up, left, down, right, and an over-full neighbor
        is discharged before its siblings are visited, i.e. the order of the
        plain recursive formulation, kept on an explicit stack.
        """
        pending = [self._discharge(start)]
        while pending:
            side, targets = pending[-1]
            if not targets:
                pending.pop()
                continue
            n = targets.pop()
            self._internal_set(n, self.cells[n].spots + 1, side)
            if self.cells[n].spots > self.neighbors(n) and self.winner() is None:
                pending.append(self._discharge(n))

    def _discharge(self, n):
        cell = self.cells[n]
        self._internal_set(n, cell.spots - self.neighbors(n), cell.side)
        r, c = self.row(n), self.col(n)
        targets = []
        if c < self.size:
            targets.append(n + 1)
        if r < self.size:
            targets.append(n + self.size)
        if c > 1:
            targets.append(n - 1)
        if r > 1:
            targets.append(n - self.size)
        # Popped from the end: up, left, down, right.
        return cell.side, targets

    def _internal_set(self, n, num, side):
        """Set square N to NUM spots of SIDE (an empty cell if NUM <= 0); no announce."""
        new_cell = Cell(side, num) if num > 0 else EMPTY_CELL
        self._counts[self.cells[n].side] -= 1
        self._counts[new_cell.side] += 1
        self.cells[n] = new_cell

    def set_square(self, r, c, num, side):
        """Set a square directly; not recorded in the undo history."""
        if not self.exists(r, c):
            raise ValueError(f"no square at ({r}, {c})")
        if num > self.neighbors(r, c):
            raise ValueError(f"square {r} {c} holds at most {self.neighbors(r, c)} spots")
        if num > 0 and side == Side.NEUTRAL:
            raise ValueError("occupied squares need a player side")
        self._internal_set(self.sq_num(r, c), num, side)
        self._announce()

    def _mark_undo(self):
        self.history.append(tuple(self.cells))
        self.move_count += 1

    def undo(self):
        """Undo the most recent move; only back to the last clear or copy."""
        if not self.history:
            raise NothingToUndo("no move to undo")
        self.history.pop()
        self._restore(self.history[-1] if self.history else self._base)
        self.move_count -= 1
        self._announce()

    # ---- notification --------------------------------------------------

    def set_notifier(self, notify):
        """Register NOTIFY(board) for state changes and fire it once now."""
        self._notifier = notify if notify is not None else _nop
        self._announce()

    def _announce(self):
        self._notifier(self)

    # ---- comparison and rendering ---------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __hash__(self):
        return self.total_spots()

    def __str__(self):
        lines = ["==="]
        for r in range(self.size):
            row_cells = self.cells[r * self.size:(r + 1) * self.size]
            lines.append("    " + " ".join(str(cell) for cell in row_cells))
        lines.append("===")
        return "\n".join(lines)

    def to_display_string(self):
        """Human-readable rendition with row and column numbers."""
        lines = str(self).splitlines()[1:-1]
        out = [f"{i:2d} {line.strip()}" for i, line in enumerate(lines, start=1)]
        out.append("  " + "".join(f"{c:3d}" for c in range(1, self.size + 1)))
        return "\n".join(out)
