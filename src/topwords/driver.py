"""Feeds words from a line stream into a tracker."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .tracker import WordCloudTracker


@dataclass
class RunStats:
    """Counters collected while driving a tracker.

    Attributes:
        lines: Input lines read.
        words: Tokens fed to the tracker.
        admitted: Tokens that passed the minimum length filter.
        emitted: Rankings produced.
        stopped_early: True if output closed before input was exhausted.
    """

    lines: int = 0
    words: int = 0
    admitted: int = 0
    emitted: int = 0
    stopped_early: bool = False

    def summary(self) -> str:
        text = (
            f"Read {self.lines} line(s), {self.words} word(s): "
            f"{self.admitted} admitted, {self.emitted} ranking(s) emitted"
        )
        if self.stopped_early:
            text += " (output closed early)"
        return text


def iter_words(lines: Iterable[str]) -> Iterator[str]:
    """Yield whitespace-separated words, line by line, left to right."""
    for line in lines:
        yield from line.split()


def run(lines: Iterable[str], tracker: WordCloudTracker) -> RunStats:
    """Process every word in ``lines`` until input ends or the sink closes.

    Args:
        lines: Line source, e.g. ``sys.stdin`` or an open file.
        tracker: Tracker to feed. Its sink is checked for a ``closed`` flag
            after every ranking.

    Returns:
        Counters for the run.
    """
    stats = RunStats()
    admitted_before = tracker.admitted

    for word in iter_words(_counted(lines, stats)):
        stats.words += 1
        ranking = tracker.process(word)
        if ranking is None:
            continue
        stats.emitted += 1
        if getattr(tracker.sink, "closed", False):
            stats.stopped_early = True
            break

    stats.admitted = tracker.admitted - admitted_before
    return stats


def _counted(lines: Iterable[str], stats: RunStats) -> Iterator[str]:
    for line in lines:
        stats.lines += 1
        yield line
