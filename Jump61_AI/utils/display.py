"""Text rendering of the board for console play."""


def render(board, last_move, side, winner):
    """Renderer callback for Game: print the numbered board and whose turn it is."""
    print(board.to_display_string())
    if winner is not None:
        print(f"{winner} wins")
    elif last_move is None:
        print(f"{side} to move")
    else:
        print(f"Last move {last_move}; {side} to move")


def print_dump(board):
    """Board notifier that prints the dump format after each change."""
    print(board, end="")
