"""Report sinks that receive rankings from the tracker.

A sink is anything with a ``notify(ranking)`` method. The console sinks
write one line per ranking and flush immediately so downstream consumers
such as ``head`` see output as it is produced. When the reader on the other
end of the pipe goes away, the write fails with ``BrokenPipeError``; the
sink records that as ``closed`` and ignores later rankings so the driver
can stop reading input.
"""

import json
import sys
from abc import ABC, abstractmethod
from typing import Protocol, TextIO

Ranking = list[tuple[str, int]]


class ReportSink(Protocol):
    """Receiver of ranked (word, count) lists."""

    def notify(self, ranking: Ranking) -> None: ...


def format_ranking(ranking: Ranking) -> str:
    """Format a ranking as space-joined ``word: count`` segments."""
    return " ".join(f"{word}: {count}" for word, count in ranking)


class StreamSink(ABC):
    """Base for sinks that write one line per ranking to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize sink.

        Args:
            stream: Output stream. Defaults to ``sys.stdout`` at write time,
                so replacing ``sys.stdout`` (e.g. pytest capture) is honored.
        """
        self._stream = stream
        self.closed = False
        self.lines_written = 0

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @abstractmethod
    def render(self, ranking: Ranking) -> str:
        """Return the line for a ranking, without the trailing newline."""

    def notify(self, ranking: Ranking) -> None:
        """Write the ranking as one line, unless the reader has gone away."""
        if self.closed:
            return
        line = self.render(ranking)
        try:
            self.stream.write(line + "\n")
            self.stream.flush()
        except BrokenPipeError:
            self.closed = True
            return
        self.lines_written += 1


class ConsoleSink(StreamSink):
    """Plain text sink: ``word: count word: count ...``."""

    def render(self, ranking: Ranking) -> str:
        return format_ranking(ranking)


class JsonLinesSink(StreamSink):
    """JSON sink: one array of ``{"word", "count"}`` objects per line."""

    def render(self, ranking: Ranking) -> str:
        return json.dumps([{"word": w, "count": c} for w, c in ranking], ensure_ascii=False)


class CollectingSink:
    """Keeps every ranking in memory."""

    def __init__(self) -> None:
        self.rankings: list[Ranking] = []
        self.closed = False

    def notify(self, ranking: Ranking) -> None:
        self.rankings.append(list(ranking))

    @property
    def last(self) -> Ranking | None:
        return self.rankings[-1] if self.rankings else None
