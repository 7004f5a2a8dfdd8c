"""Game loop and turn management for Jump61."""

try:
    from Board import Board
    from Square import Side
    from engine import referee
    from engine.errors import OutOfBoundsError
    from utils import timer
    from utils.logger import log_event
except ImportError:
    from Jump61_AI.Board import Board
    from Jump61_AI.Square import Side
    from Jump61_AI.engine import referee
    from Jump61_AI.engine.errors import OutOfBoundsError
    from Jump61_AI.utils import timer
    from Jump61_AI.utils.logger import log_event


class Game:
    def __init__(self, board_size, red_player, blue_player, move_timeout=None, logger=log_event, renderer=None, notifier=None, move_limit=None):
        self.board = Board(size=board_size)
        self.move_timeout = move_timeout
        self.players = {Side.RED: red_player, Side.BLUE: blue_player}
        self.logger = logger
        self.move_index = 0
        self.renderer = renderer
        self.move_limit = move_limit
        if notifier is not None:
            self.board.set_notifier(notifier)

    def play(self):
        """Run a single game. Returns the winning Side, or None if move_limit is reached first."""
        view = self.board.readonly_board()
        winner = None
        last_move = None
        side = self.board.whose_move()
        while winner is None:
            if self.move_limit is not None and self.move_index >= self.move_limit:
                self.logger(f"Result: no winner after {self.move_index} moves")
                break

            side = self.board.whose_move()
            if self.renderer:
                self.renderer(view, last_move, side, None)

            player = self.players[side]
            deadline = timer.deadline_after(self.move_timeout) if self.move_timeout else None

            try:
                move = player.get_move(view, deadline=deadline)
                square = referee.check_move(move, self.board, side, deadline, move_index=self.move_index)
            except (TimeoutError, ValueError, OutOfBoundsError) as exc:
                self.logger(f"Disqualification: {side} - {exc}")
                winner = side.opposite()
                break

            self.board.add_spot(side, square)
            last_move = self.board.move_string(square)
            self.move_index += 1
            self.logger(f"Move {self.move_index}: {side} {last_move}")

            winner = self.board.get_winner()
            if winner is not None:
                self.logger(f"Winner: {winner}")

        if self.renderer:
            self.renderer(view, last_move, side, winner)
        return winner
