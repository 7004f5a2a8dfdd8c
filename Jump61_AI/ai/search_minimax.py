"""Fixed-depth minimax with alpha-beta pruning over a scratch copy of the board."""

import time

from . import heuristic

try:
    from Square import Side
except ImportError:
    from Jump61_AI.Square import Side


INF = 10 ** 9  # larger than any static evaluation
DEFAULT_DEPTH = 2


class MinimaxSearcher:
    """Encapsulates the state and logic for a minimax search."""

    def __init__(self, side, depth=DEFAULT_DEPTH, stats=None):
        if depth < 1:
            raise ValueError("search depth must be at least 1")
        self.side = side
        self.depth = depth
        self.stats_list = stats

        # Internal state
        self.node_counter = 0
        self.start_time = None
        self.found_move = None
        self.root_score = None

    def choose_move(self, board):
        """
        Return the square number of the best move for self.side.
        BOARD itself is never modified; the search runs on a clone.
        """
        work = board.clone()
        if work.whose_move() is not self.side:
            raise ValueError(f"{self.side} is not the side to move")
        self.start_time = time.time()
        self.node_counter = 0
        self.found_move = None

        sense = 1 if self.side is Side.RED else -1
        self.root_score = self._minimax(work, self.depth, True, sense, -INF, INF)

        best_move = self.found_move
        if best_move is None:
            best_move = self._fallback_move(work)

        if self.stats_list is not None:
            self._record_stats()

        return best_move

    def _minimax(self, board, depth, save_move, sense, alpha, beta):
        self.node_counter += 1
        node_side = Side.RED if sense == 1 else Side.BLUE

        if depth == 0 or board.get_winner() is not None:
            return self._evaluate(board)
        moves = board.possible_moves(node_side)
        if not moves:
            return self._evaluate(board)

        best_score = -sense * INF
        for move in moves:
            board.add_spot(node_side, move)
            try:
                score = self._minimax(board, depth - 1, False, -sense, alpha, beta)
            finally:
                board.undo()

            if sense == 1:
                if score > best_score:
                    best_score = score
                    if save_move:
                        self.found_move = move
                alpha = max(alpha, best_score)
            else:
                if score < best_score:
                    best_score = score
                    if save_move:
                        self.found_move = move
                beta = min(beta, best_score)

            if alpha >= beta:
                break

        return best_score

    def _evaluate(self, board):
        return heuristic.static_eval(board, winning_value=board.size * board.size)

    def _fallback_move(self, board):
        moves = board.possible_moves(self.side)
        if not moves:
            raise ValueError("No legal moves available for search fallback")
        return moves[0]

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
    searcher = MinimaxSearcher(side=side, depth=depth, stats=stats)
    return searcher.choose_move(board)
