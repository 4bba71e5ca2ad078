"""In-memory article feed with a read cursor, used for infinite scroll.

The store never fetches or renders anything. It holds the articles from the
last successful fetch and hands them out in batches. Once every article has
been handed out the controller calls ``reshuffle()`` to start a new pass in a
different random order, so a finite pool reads as an endless feed.
"""

import logging
import random
from collections.abc import Iterable

from app.domain.entities.article import Article

logger = logging.getLogger(__name__)


class FeedStore:
    """Article sequence + cursor + batching/shuffling."""

    def __init__(
        self,
        page_size: int = 5,
        desktop_limit: int = 9,
        rng: random.Random | None = None,
    ):
        self.page_size = page_size
        self.desktop_limit = desktop_limit
        self._rng = rng or random.Random()
        self._articles: list[Article] = []
        self._cursor = 0
        self._has_looped = False

    # ── State ──────────────────────────────────────────────────────

    @property
    def articles(self) -> tuple[Article, ...]:
        return tuple(self._articles)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def has_looped(self) -> bool:
        return self._has_looped

    @property
    def is_exhausted(self) -> bool:
        return self._cursor >= len(self._articles)

    def __len__(self) -> int:
        return len(self._articles)

    # ── Operations ─────────────────────────────────────────────────

    def load(self, articles: Iterable[Article]) -> None:
        """Replace the held sequence and start from the beginning."""
        self._articles = list(articles)
        self._cursor = 0
        self._has_looped = False

    def next_batch(self, n: int | None = None) -> list[Article]:
        """Return up to *n* articles from the cursor and advance past them.

        An empty list means the cursor already reached the end.
        """
        size = self.page_size if n is None else n
        if size <= 0:
            return []
        batch = self._articles[self._cursor : self._cursor + size]
        self._cursor += len(batch)
        return batch

    def reshuffle(self) -> None:
        """Fisher–Yates shuffle over the whole sequence; restart the cursor."""
        if not self._articles:
            return

        for i in range(len(self._articles) - 1, 0, -1):
            j = self._rng.randint(0, i)
            self._articles[i], self._articles[j] = self._articles[j], self._articles[i]

        self._cursor = 0
        self._has_looped = True
        logger.info("Articles shuffled for infinite scroll (%d articles)", len(self._articles))

    def first_n(self, n: int | None = None) -> list[Article]:
        """Fixed prefix for the non-scrolling layout. Leaves the cursor alone."""
        size = self.desktop_limit if n is None else n
        return self._articles[: max(size, 0)]

    def reset_cursor(self) -> None:
        """Start over without reordering (used when the layout is re-rendered)."""
        self._cursor = 0
        self._has_looped = False
