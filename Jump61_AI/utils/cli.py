"""CLI options for selecting players, board size, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Jump61 with a minimax AI")
    parser.add_argument("--board-size", type=int, help="Squares on a side (2-10)")
    parser.add_argument("--timeout", type=float, help="Seconds per move (default from settings)")
    parser.add_argument("--depth", type=int, help="Search depth in plies for AI players")
    parser.add_argument(
        "--mode",
        choices=["ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human"],
        default=None,
        help="Play mode (who plays red/blue)",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--show-board", action="store_true", help="Print the board after every change")
    parser.add_argument("--stats", action="store_true", help="Print search statistics at the end")
    return parser.parse_args(argv)
