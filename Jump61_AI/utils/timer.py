"""Helpers for enforcing optional per-move time limits."""

import time


def deadline_after(seconds):
    """Absolute deadline SECONDS from now, or None when there is no limit."""
    if not seconds:
        return None
    return time.time() + seconds


def time_remaining(deadline):
    if deadline is None:
        return float("inf")
    return deadline - time.time()
