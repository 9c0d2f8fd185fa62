"""Console output helpers.

Some fitting routines print progress straight to the console. The helper
here silences them for the duration of a single call.
"""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from typing import Iterator

logger = logging.getLogger(__name__)


@contextmanager
def suppress_console_output() -> Iterator[None]:
    """Redirect ``sys.stdout`` and ``sys.stderr`` to the null device.

    ``os.devnull`` resolves to ``/dev/null`` on POSIX and ``nul`` on Windows.
    Both streams are restored and the null device is closed on every exit
    path, including exceptions raised inside the block.

    The streams are process-wide; callers running fits concurrently must
    serialize use of this context themselves.

    Examples
    --------
    >>> with suppress_console_output():
    ...     print("not shown")
    """
    saved_stdout, saved_stderr = sys.stdout, sys.stderr
    devnull = open(os.devnull, "w")
    logger.debug("Suppressing console output via %s", os.devnull)
    try:
        sys.stdout = devnull
        sys.stderr = devnull
        yield
    finally:
        sys.stdout = saved_stdout
        sys.stderr = saved_stderr
        devnull.close()
