"""Timestamped event log for games and board diagnostics."""

import datetime
import sys


def log_event(message, stream=None):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}", file=stream or sys.stdout)


def log_diagnostic(message):
    log_event(message, stream=sys.stderr)


def null_logger(message):
    pass
