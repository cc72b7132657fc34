"""Sliding-window word frequency tracking.

The tracker keeps the ``window_size`` most recent admitted words in a FIFO
window together with a count per distinct word. Once the window is full,
every admitted word produces one ranking of the ``cloud_size`` most frequent
words, which is handed to the sink.

Words with equal counts are ranked alphabetically, so the output depends
only on the window contents and never on dict ordering.
"""

from collections import deque

from .config import CloudConfig
from .sink import Ranking, ReportSink


def _rank_key(item: tuple[str, int]) -> tuple[int, str]:
    word, count = item
    return (-count, word)


class WordCloudTracker:
    """Bounded window of recent words with incrementally maintained counts.

    Example usage:
        sink = ConsoleSink()
        tracker = WordCloudTracker(CloudConfig(window_size=3), sink)
        for word in ["a", "b", "a"]:
            tracker.process(word)  # third call prints "a: 2 b: 1"

    The config must already be validated (``window_size >= 1``).
    """

    def __init__(self, config: CloudConfig, sink: ReportSink) -> None:
        """Initialize tracker with an empty window.

        Args:
            config: Run configuration.
            sink: Receiver notified with every ranking.
        """
        self.config = config
        self.sink = sink
        self._window: deque[str] = deque()
        self._counts: dict[str, int] = {}
        self.admitted = 0  # words that passed the length filter

    def __len__(self) -> int:
        return len(self._window)

    @property
    def window(self) -> tuple[str, ...]:
        """Snapshot of the window, oldest word first."""
        return tuple(self._window)

    @property
    def frequencies(self) -> dict[str, int]:
        """Snapshot of the per-word counts in the window."""
        return dict(self._counts)

    @property
    def is_full(self) -> bool:
        return len(self._window) == self.config.window_size

    def process(self, word: str) -> Ranking | None:
        """Admit a word and emit a ranking if the window is full.

        Args:
            word: Token as received, compared case- and punctuation-sensitively.

        Returns:
            The ranking passed to the sink, or None if nothing was emitted
            (word filtered out or window not yet full).
        """
        if len(word) < self.config.min_length:
            return None

        self.admitted += 1
        self._window.append(word)
        self._counts[word] = self._counts.get(word, 0) + 1

        # Capacity is exceeded by at most one per admitted word
        if len(self._window) > self.config.window_size:
            self._evict(self._window.popleft())

        if not self.is_full:
            return None

        ranking = self.ranking()
        self.sink.notify(list(ranking))
        return ranking

    def _evict(self, word: str) -> None:
        remaining = self._counts[word] - 1
        if remaining:
            self._counts[word] = remaining
        else:
            del self._counts[word]

    def ranking(self) -> Ranking:
        """Top ``cloud_size`` (word, count) pairs, highest count first."""
        ranked = sorted(self._counts.items(), key=_rank_key)
        return ranked[: self.config.cloud_size]
