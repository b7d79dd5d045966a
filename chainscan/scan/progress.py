"""
Heuristic scan progress.

Indexers rarely say up front how many records a wallet has, so progress is
reported against either an authoritative total (when the first page carried
one) or a running estimate that is revised upward as records keep coming.
Estimated progress never claims 100 before the last page has been seen, and
no reported value is ever lower than the previous one.
"""

from __future__ import annotations

import logging
import math
from typing import Callable

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]

INITIAL_ESTIMATE_PAGES = 10
GROWTH_PAGES = 2
ESTIMATE_CAP = 99


class ProgressEstimator:
    def __init__(
        self,
        on_progress: ProgressCallback | None = None,
        total: int | None = None,
    ):
        self._on_progress = on_progress
        self._total = total if total and total > 0 else None
        self._estimate: int | None = None
        self._processed = 0
        self._last: int | None = None

    @property
    def processed(self) -> int:
        return self._processed

    @property
    def estimate(self) -> int | None:
        return self._total if self._total is not None else self._estimate

    @property
    def last_reported(self) -> int | None:
        return self._last

    def page_done(self, records: int, page_size: int, is_last_page: bool) -> int:
        """Account for one processed page and report the resulting percentage."""
        self._processed += records

        if self._total is not None:
            percent = min(100, math.floor(self._processed / self._total * 100))
        elif is_last_page:
            self._estimate = self._processed
            percent = 100
        else:
            if self._estimate is None:
                self._estimate = max(page_size * INITIAL_ESTIMATE_PAGES, 1)
            if self._processed >= self._estimate:
                self._estimate = max(self._estimate * 2, self._processed + page_size * GROWTH_PAGES)
            percent = min(ESTIMATE_CAP, math.floor(self._processed / self._estimate * 100))

        self._report(percent)
        return self._last if self._last is not None else percent

    def finish(self) -> None:
        """Terminal report, issued on every exit path so a caller never waits on a stuck bar."""
        self._report(100)

    def _report(self, percent: int) -> None:
        if self._last is not None and percent <= self._last:
            return
        self._last = percent
        if self._on_progress is None:
            return
        try:
            self._on_progress(percent)
        except Exception:
            logger.exception("Progress callback failed at %d%%", percent)
