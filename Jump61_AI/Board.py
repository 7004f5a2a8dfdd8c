"""Board state, chain-reaction move application, and whole-move undo.

Squares are addressed either by 1-based (row, col) or by square number,
numbering squares in row-major order from 0 to size*size - 1.
"""

try:
    from Square import Side, Square
    from engine.errors import InvariantViolation, OutOfBoundsError, ReadOnlyBoardError
    from utils.logger import log_diagnostic
except ImportError:
    from Jump61_AI.Square import Side, Square
    from Jump61_AI.engine.errors import InvariantViolation, OutOfBoundsError, ReadOnlyBoardError
    from Jump61_AI.utils.logger import log_diagnostic


DUMP_FENCE = "==="


def _nop(board):
    pass


class Board:
    def __init__(self, size=6):
        self._notifier = _nop
        self._readonly = None
        self._reset(size)

    @classmethod
    def from_board(cls, other):
        """New board holding OTHER's contents with a fresh undo history."""
        board = cls(other.size)
        board._cells = [row[:] for row in other._cells]
        board._recount()
        board._history = [board._snapshot()]
        return board

    @classmethod
    def from_dump(cls, text):
        """Rebuild a board from the output of str(board)."""
        lines = [line.strip() for line in text.strip().splitlines()]
        if len(lines) < 3 or lines[0] != DUMP_FENCE or lines[-1] != DUMP_FENCE:
            raise ValueError("dump must be enclosed in '===' lines")
        rows = [line.split() for line in lines[1:-1]]
        size = len(rows)
        board = cls(size)
        for r, tokens in enumerate(rows, start=1):
            if len(tokens) != size:
                raise ValueError(f"row {r} has {len(tokens)} squares, expected {size}")
            for c, token in enumerate(tokens, start=1):
                if len(token) < 2 or not token[:-1].isdigit():
                    raise ValueError(f"bad square {token!r} at {r} {c}")
                square = Square.of(Side.from_symbol(token[-1]), int(token[:-1]))
                board.internal_set(board.sq_num(r, c), square.spots, square.side)
        board._history = [board._snapshot()]
        return board

    def _reset(self, size):
        if size < 1:
            raise ValueError("board size must be positive")
        self._size = size
        self._cells = [[Square.empty()] * size for _ in range(size)]
        self._counts = {Side.RED: 0, Side.BLUE: 0, Side.NEUTRAL: size * size}
        self._total = 0
        self._move_number = 0
        self._history = [self._snapshot()]

    # ------------------------------------------------------------------
    # Queries

    @property
    def size(self):
        return self._size

    @property
    def move_number(self):
        return self._move_number

    @property
    def history(self):
        return self._history

    def get(self, r, c=None):
        """Square at row R, column C, or at square number R when C is omitted."""
        n = self._checked_square(r, c)
        return self._cells[n // self._size][n % self._size]

    def num_pieces(self, side=None):
        if side is None:
            return self._total
        return sum(sq.spots for row in self._cells for sq in row if sq.side is side)

    def num_of_side(self, side):
        return self._counts[side]

    def whose_move(self):
        """Side to move next; on a won board this is the loser."""
        return Side.RED if (self._total + self._size) % 2 == 0 else Side.BLUE

    def get_winner(self):
        area = self._size * self._size
        if self._counts[Side.RED] == area:
            return Side.RED
        if self._counts[Side.BLUE] == area:
            return Side.BLUE
        return None

    def exists(self, r, c=None):
        if c is None:
            return 0 <= r < self._size * self._size
        return 1 <= r <= self._size and 1 <= c <= self._size

    def row(self, n):
        return n // self._size + 1

    def col(self, n):
        return n % self._size + 1

    def sq_num(self, r, c):
        return (r - 1) * self._size + (c - 1)

    def move_string(self, r, c=None):
        if c is None:
            r, c = self.row(r), self.col(r)
        return f"{r} {c}"

    def neighbors(self, r, c=None):
        """Number of orthogonal neighbours of a square: 2, 3 or 4."""
        if c is None:
            r, c = self.row(r), self.col(r)
        count = 0
        if r > 1:
            count += 1
        if r < self._size:
            count += 1
        if c > 1:
            count += 1
        if c < self._size:
            count += 1
        return count

    def is_legal(self, side, r=None, c=None):
        """True iff SIDE may add a spot at the given square (or at all, if none given).

        Whose turn it is is not checked here.
        """
        if self.get_winner() is not None:
            return False
        if r is None:
            return True
        if c is not None:
            if not self.exists(r, c):
                return False
            r = self.sq_num(r, c)
        if not self.exists(r):
            return False
        return self.get(r).side in (Side.NEUTRAL, side)

    def possible_moves(self, side):
        return [n for n in range(self._size * self._size) if self.is_legal(side, n)]

    # ------------------------------------------------------------------
    # Mutation

    def add_spot(self, side, r, c=None):
        """Add a spot of SIDE and run the resulting cascade.  Assumes is_legal."""
        n = r if c is None else self.sq_num(r, c)
        self._spread(side, n)
        self._move_number += 1
        self._history.append(self._snapshot())
        if __debug__:
            self.check_invariants()
        self._announce()

    def _spread(self, side, start):
        # LIFO with neighbours pushed in reverse, so squares are visited in the
        # same order as a depth-first recursion over (up, down, left, right).
        size = self._size
        pending = [start]
        while pending:
            if self.get_winner() is not None:
                break
            n = pending.pop()
            r, c = n // size, n % size
            spots = self._cells[r][c].spots + 1
            if spots > self.neighbors(n):
                self.internal_set(n, 1, side)
                if c < size - 1:
                    pending.append(n + 1)
                if c > 0:
                    pending.append(n - 1)
                if r < size - 1:
                    pending.append(n + size)
                if r > 0:
                    pending.append(n - size)
            else:
                self.internal_set(n, spots, side)

    def set(self, r, c, num, side):
        """Set square (R, C) to NUM spots of SIDE (NEUTRAL when NUM is 0)."""
        n = self._checked_square(r, c)
        self.internal_set(n, num, side)
        self._history[-1] = self._snapshot()
        self._announce()

    def internal_set(self, n, num, side):
        """Unchecked, silent version of set() by square number."""
        if num == 0:
            side = Side.NEUTRAL
        new = Square.of(side, num)
        r, c = n // self._size, n % self._size
        old = self._cells[r][c]
        self._cells[r][c] = new
        self._counts[old.side] -= 1
        self._counts[new.side] += 1
        self._total += new.spots - old.spots

    def undo(self):
        """Undo one add_spot, cascade included."""
        if self._move_number <= 0:
            log_diagnostic("Cannot undo, at initial state")
            return
        self._history.pop()
        self._move_number -= 1
        self._cells = [row[:] for row in self._history[-1]]
        self._recount()
        self._announce()

    def clear(self, size):
        """Empty SIZE x SIZE board with a cleared undo history."""
        self._reset(size)
        self._announce()

    def copy(self, other):
        """Take OTHER's contents, move number, and history."""
        self._size = other.size
        self._cells = [row[:] for row in other._cells]
        self._move_number = other.move_number
        self._history = [[row[:] for row in grid] for grid in other.history]
        self._recount()

    def clone(self):
        board = Board(self._size)
        board.copy(self)
        return board

    def set_notifier(self, notifier):
        """Call NOTIFIER(board) after each change; None restores the no-op."""
        self._notifier = notifier or _nop

    def readonly_board(self):
        if self._readonly is None:
            self._readonly = ConstantBoard(self)
        return self._readonly

    def _announce(self):
        self._notifier(self)

    def _snapshot(self):
        # Squares are immutable, so copying the rows is a deep copy.
        return [row[:] for row in self._cells]

    def _recount(self):
        self._counts = {Side.RED: 0, Side.BLUE: 0, Side.NEUTRAL: 0}
        self._total = 0
        for row in self._cells:
            for sq in row:
                self._counts[sq.side] += 1
                self._total += sq.spots

    def _checked_square(self, r, c):
        if c is None:
            if not self.exists(r):
                raise OutOfBoundsError(f"square {r} is off the board")
            return r
        if not self.exists(r, c):
            raise OutOfBoundsError(f"square {r} {c} is off the board")
        return self.sq_num(r, c)

    def check_invariants(self):
        for n in range(self._size * self._size):
            sq = self.get(n)
            if (sq.side is Side.NEUTRAL) != (sq.spots == 0):
                raise InvariantViolation(f"square {self.move_string(n)} is {sq}")
            # A square that has just jumped holds one spot even with no neighbours.
            if sq.spots > max(self.neighbors(n), 1):
                raise InvariantViolation(f"square {self.move_string(n)} is overfull")
        if self._history[self._move_number] != self._cells:
            raise InvariantViolation("history out of step with the board")

    # ------------------------------------------------------------------
    # Text

    def __str__(self):
        lines = [DUMP_FENCE]
        for row in self._cells:
            lines.append("    " + "".join(f"{sq.spots}{sq.side.symbol} " for sq in row))
        lines.append(DUMP_FENCE)
        return "\n".join(lines) + "\n"

    def to_display_string(self):
        """Dump rows labelled with row numbers, followed by a column-number footer."""
        lines = str(self).strip().splitlines()
        out = [f"{i:2d} {line.strip()}" for i, line in enumerate(lines[1:-1], start=1)]
        out.append("  " + "".join(f"{c:3d}" for c in range(1, self._size + 1)))
        return "\n".join(out)

    def __eq__(self, other):
        if not isinstance(other, (Board, ConstantBoard)):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None


class ConstantBoard:
    """Read-only view of a Board: queries pass through, mutators raise."""

    _MUTATORS = frozenset({"add_spot", "set", "internal_set", "undo", "clear", "copy", "set_notifier"})

    def __init__(self, board):
        self._board = board

    def __getattr__(self, name):
        if name == "_board":
            raise AttributeError(name)
        if name in self._MUTATORS:
            raise ReadOnlyBoardError(f"{name}() is not allowed on a read-only board")
        return getattr(self._board, name)

    def readonly_board(self):
        return self

    def __str__(self):
        return str(self._board)

    def __eq__(self, other):
        return self._board == other

    __hash__ = None
