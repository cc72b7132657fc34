"""Sliding-window word cloud over a stream of words."""

from .cli import main
from .config import CloudConfig, ConfigError
from .driver import RunStats, iter_words, run
from .sink import CollectingSink, ConsoleSink, JsonLinesSink, Ranking, ReportSink, format_ranking
from .tracker import WordCloudTracker

__all__ = [
    "CloudConfig",
    "ConfigError",
    "WordCloudTracker",
    "ReportSink",
    "Ranking",
    "ConsoleSink",
    "JsonLinesSink",
    "CollectingSink",
    "format_ranking",
    "RunStats",
    "iter_words",
    "run",
    "main",
]
