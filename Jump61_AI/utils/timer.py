"""Helpers for enforcing optional per-move time limits."""

import time


def deadline_after(seconds):
    return time.time() + seconds


def expired(deadline):
    """True once DEADLINE has passed; a None deadline never expires."""
    return deadline is not None and time.time() > deadline
