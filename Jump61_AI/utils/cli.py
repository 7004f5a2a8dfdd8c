"""CLI options for selecting players, board size, and config paths."""


MODES = ["ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human"]


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(description="Jump61 (chain-reaction cubes) with a minimax AI")
    parser.add_argument("--board-size", type=int, help="Board size N for an N x N board (at least 2)")
    parser.add_argument("--depth", type=int, help="Search depth for AI players")
    parser.add_argument("--seed", type=int, help="Random seed for AI players")
    parser.add_argument("--timeout", type=float, help="Seconds per move (default: no limit)")
    parser.add_argument(
        "--mode",
        choices=MODES,
        default=None,
        help="Play mode (who plays red/blue; red moves first)",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--move-limit", type=int, default=None, help="Stop after this many moves without a winner")
    parser.add_argument("--dump", action="store_true", help="Print the board dump after every change")
    parser.add_argument("--quiet", action="store_true", help="Do not render the board between moves")
    return parser


def parse_args(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.board_size is not None and args.board_size < 2:
        parser.error("--board-size must be at least 2")
    if args.depth is not None and args.depth < 1:
        parser.error("--depth must be at least 1")
    return args
