"""Tests for topwords.sink module."""

import io
import json

import pytest

from topwords.sink import CollectingSink, ConsoleSink, JsonLinesSink, StreamSink, format_ranking


class ClosedPipe(io.StringIO):
    """Stream whose reader has gone away."""

    def write(self, s: str) -> int:
        raise BrokenPipeError(32, "Broken pipe")


class TestFormatRanking:
    """Tests for format_ranking."""

    def test_formats_pairs(self) -> None:
        assert format_ranking([("a", 2), ("b", 1)]) == "a: 2 b: 1"

    def test_empty_ranking(self) -> None:
        assert format_ranking([]) == ""


class TestStreamSink:
    """Tests for the StreamSink base."""

    def test_base_cannot_be_instantiated(self) -> None:
        """Test that subclasses must provide render."""
        with pytest.raises(TypeError):
            StreamSink(io.StringIO())  # type: ignore[abstract]


class TestConsoleSink:
    """Tests for ConsoleSink."""

    def test_writes_one_line_per_ranking(self) -> None:
        stream = io.StringIO()
        sink = ConsoleSink(stream)

        sink.notify([("a", 2), ("b", 1)])
        sink.notify([])

        assert stream.getvalue() == "a: 2 b: 1\n\n"
        assert sink.lines_written == 2

    def test_defaults_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        ConsoleSink().notify([("hello", 3)])
        assert capsys.readouterr().out == "hello: 3\n"

    def test_broken_pipe_marks_closed(self) -> None:
        """Test that a closed reader is recorded instead of raised."""
        sink = ConsoleSink(ClosedPipe())

        sink.notify([("a", 1)])

        assert sink.closed is True
        assert sink.lines_written == 0

    def test_notify_after_close_is_ignored(self) -> None:
        stream = io.StringIO()
        sink = ConsoleSink(stream)
        sink.closed = True

        sink.notify([("a", 1)])

        assert stream.getvalue() == ""

    def test_other_errors_propagate(self) -> None:
        """Test that only pipe closure is treated as expected."""
        stream = io.StringIO()
        stream.close()
        with pytest.raises(ValueError):
            ConsoleSink(stream).notify([("a", 1)])


class TestJsonLinesSink:
    """Tests for JsonLinesSink."""

    def test_writes_json_array(self) -> None:
        stream = io.StringIO()
        JsonLinesSink(stream).notify([("a", 2), ("b", 1)])

        assert json.loads(stream.getvalue()) == [
            {"word": "a", "count": 2},
            {"word": "b", "count": 1},
        ]

    def test_non_ascii_kept(self) -> None:
        stream = io.StringIO()
        JsonLinesSink(stream).notify([("café", 1)])
        assert "café" in stream.getvalue()

    def test_broken_pipe_marks_closed(self) -> None:
        sink = JsonLinesSink(ClosedPipe())
        sink.notify([("a", 1)])
        assert sink.closed is True


class TestCollectingSink:
    """Tests for CollectingSink."""

    def test_collects_copies(self) -> None:
        sink = CollectingSink()
        ranking = [("a", 1)]
        sink.notify(ranking)
        ranking.append(("b", 1))

        assert sink.rankings == [[("a", 1)]]
        assert sink.last == [("a", 1)]

    def test_last_empty(self) -> None:
        assert CollectingSink().last is None
