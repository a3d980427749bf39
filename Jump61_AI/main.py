"""Entry point for jump61 matches. Load config, wire players, start Jump61game."""

from pathlib import Path

import yaml

from .Jump61game import Jump61game
from .Player import AIPlayer, HumanPlayer
from .engine.sides import Side
from .utils.cli import parse_args
from .utils.logger import log_event


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


def build_players(mode, depth, stats=None):
    """Return (red, blue) players for a play mode."""
    if mode == "ai-vs-ai":
        return AIPlayer(Side.RED, depth=depth, stats=stats), AIPlayer(Side.BLUE, depth=depth, stats=stats)
    if mode == "human-vs-ai":
        return HumanPlayer(Side.RED), AIPlayer(Side.BLUE, depth=depth, stats=stats)
    if mode == "ai-vs-human":
        return AIPlayer(Side.RED, depth=depth, stats=stats), HumanPlayer(Side.BLUE)
    if mode == "human-vs-human":
        return HumanPlayer(Side.RED), HumanPlayer(Side.BLUE)
    raise ValueError(f"Unsupported mode: {mode}")


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    board_size = args.board_size or settings.get("board_size", 6)
    move_timeout = args.timeout or settings.get("move_timeout_seconds")
    depth = args.depth or settings.get("search_depth", 4)
    mode = args.mode or settings.get("mode", "ai-vs-ai")

    stats = [] if args.stats else None
    red, blue = build_players(mode, depth, stats=stats)

    renderer = None
    if args.show_board:
        def renderer(board):
            print(board.to_display_string())

    game = Jump61game(
        board_size=board_size,
        move_timeout=move_timeout,
        red_player=red,
        blue_player=blue,
        logger=log_event,
        renderer=renderer,
    )
    result = game.play()
    print(f"{result.label} wins")

    if stats:
        nodes = sum(s["nodes"] for s in stats)
        elapsed = sum(s["time"] for s in stats)
        print(f"Searches: {len(stats)}, nodes: {nodes}, time: {elapsed:.2f}s")
    return result


if __name__ == "__main__":
    main()
