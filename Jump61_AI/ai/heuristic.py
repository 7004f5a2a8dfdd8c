"""Static evaluation of Jump61 positions (positive favours Red)."""

try:
    from Square import Side
except ImportError:
    from Jump61_AI.Square import Side


def static_eval(board, winning_value=None):
    """
    Square-count difference Red minus Blue.
    With winning_value set, a won board scores +winning_value (Red) or -winning_value (Blue).
    """
    if winning_value is not None:
        winner = board.get_winner()
        if winner is Side.RED:
            return winning_value
        if winner is Side.BLUE:
            return -winning_value
    return board.num_of_side(Side.RED) - board.num_of_side(Side.BLUE)
