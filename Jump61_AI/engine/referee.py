"""Move notation parsing, time control, and legality checks."""

try:
    from engine.errors import IllegalMoveError, OutOfBoundsError
    from utils import timer
except ImportError:
    from Jump61_AI.engine.errors import IllegalMoveError, OutOfBoundsError
    from Jump61_AI.utils import timer


def parse_move(text, board):
    """Convert a "row col" string into a square number of BOARD."""
    parts = text.split()
    if len(parts) != 2:
        raise IllegalMoveError(f"expected 'row col', got {text!r}")
    try:
        r, c = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise IllegalMoveError(f"expected two integers, got {text!r}") from exc
    if not board.exists(r, c):
        raise OutOfBoundsError(f"move {r} {c} is off the board")
    return board.sq_num(r, c)


def check_move(move, board, side, deadline=None, move_index=None):
    """
    Validate a move string against time, bounds, and ownership.
    Returns the square number; raises IllegalMoveError/OutOfBoundsError/TimeoutError.
    """
    if timer.expired(deadline):
        raise TimeoutError("Move exceeded allotted time")

    square = parse_move(move, board)
    if not board.is_legal(side, square):
        where = f"move {move_index + 1}" if move_index is not None else "move"
        raise IllegalMoveError(f"Illegal {where} for {side}: {move}")
    return square
