"""Timestamped event logging for matches and debugging."""

import datetime
import sys


def log_event(message, stream=None):
    stream = stream or sys.stdout
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}", file=stream, flush=True)


def describe_move(index, side, move_text):
    """Transcript line for a completed move, e.g. 'Move 3: Red 2 1'."""
    return f"Move {index}: {side.label} {move_text}"
