"""Automated player backed by alpha-beta minimax."""

import random

try:
    from Player import Player
    from ai import search_minimax
except ImportError:
    from Jump61_AI.Player import Player
    from Jump61_AI.ai import search_minimax


class AI(Player):
    def __init__(self, side, depth=search_minimax.DEFAULT_DEPTH, seed=0, stats=None):
        super().__init__(side)
        self.depth = depth
        self.stats = stats
        # Seeded for randomized tie-breaking; moves are currently chosen
        # deterministically by square order.
        self.random = random.Random(seed)

    def get_move(self, board, deadline=None):
        choice = search_minimax.choose_move(
            board,
            self.side,
            depth=self.depth,
            stats=self.stats,
        )
        return board.move_string(choice)
