from __future__ import annotations

import logging
import time
from typing import Optional

log = logging.getLogger(__name__)


class Stopwatch:
    """
    Context manager measuring wall-clock time of a block.

        with Stopwatch("next guess") as sw:
            ...
        print(f"Time: {sw.elapsed:.02f} seconds")
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name
        self.elapsed = 0.0
        self._t0 = 0.0

    def __enter__(self) -> "Stopwatch":
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, *exc) -> None:
        self.elapsed = time.perf_counter() - self._t0
        if self.name:
            log.debug("%s took %.3f s", self.name, self.elapsed)
