"""Command-line entry points for the two dining tables."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Sequence

from .config import InvalidInput, Settings, lone_philosopher_lines, parse_settings
from .semaphore_table import SemaphoreTable
from .table import Table

_LONE_PAUSE_SECONDS = 1e-3


def _serve(argv: Sequence[str] | None, run: Callable[[Settings], object]) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_settings(args)
    except InvalidInput as error:
        print(error, flush=True)
        return 1
    if settings.philosophers == 1:
        first, last = lone_philosopher_lines(settings)
        print(first, flush=True)
        time.sleep(_LONE_PAUSE_SECONDS)
        print(last, flush=True)
        return 1
    run(settings)
    sys.stdout.flush()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the table with one lock per fork."""
    return _serve(argv, lambda settings: Table(settings).run())


def bonus_main(argv: Sequence[str] | None = None) -> int:
    """Run the table with a shared pool of forks."""
    return _serve(argv, lambda settings: SemaphoreTable(settings).run())