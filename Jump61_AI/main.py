"""Entry point for Jump61 matches. Load config, wire players, start Game."""

import yaml
from pathlib import Path

try:
    from utils.cli import parse_args
    from utils.display import print_dump, render
    from utils.logger import log_event, null_logger
    from Game import Game
    from AI import AI
    from Player import HumanPlayer
    from Square import Side
except ImportError:
    from Jump61_AI.utils.cli import parse_args
    from Jump61_AI.utils.display import print_dump, render
    from Jump61_AI.utils.logger import log_event, null_logger
    from Jump61_AI.Game import Game
    from Jump61_AI.AI import AI
    from Jump61_AI.Player import HumanPlayer
    from Jump61_AI.Square import Side


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Jump61_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def make_players(mode, depth, seed):
    """Return (red, blue) players for a play mode such as 'human-vs-ai'."""
    first, _, second = mode.partition("-vs-")
    if first not in ("ai", "human") or second not in ("ai", "human"):
        raise ValueError(f"Unsupported mode: {mode}")

    def make(kind, side, player_seed):
        if kind == "ai":
            return AI(side=side, depth=depth, seed=player_seed)
        return HumanPlayer(side=side)

    return make(first, Side.RED, seed), make(second, Side.BLUE, seed + 1)


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    board_size = args.board_size or settings.get("board_size", 6)
    depth = args.depth or settings.get("search_depth", 2)
    seed = args.seed if args.seed is not None else settings.get("seed", 0)
    move_timeout = args.timeout or settings.get("move_timeout_seconds")
    mode = args.mode or settings.get("mode", "ai-vs-ai")
    move_limit = args.move_limit or settings.get("move_limit")

    if board_size < 2:
        raise ValueError(f"board_size must be at least 2, got {board_size}")
    if depth < 1:
        raise ValueError(f"search_depth must be at least 1, got {depth}")

    red, blue = make_players(mode, depth, seed)
    game = Game(
        board_size=board_size,
        red_player=red,
        blue_player=blue,
        move_timeout=move_timeout,
        logger=null_logger if args.quiet else log_event,
        renderer=None if args.quiet else render,
        notifier=print_dump if args.dump else None,
        move_limit=move_limit,
    )
    result = game.play()
    print(f"{result} wins" if result is not None else "No winner")
    return result


if __name__ == "__main__":
    main()
