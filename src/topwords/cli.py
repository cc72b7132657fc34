#!/usr/bin/env python3
"""Word cloud CLI: rank the most frequent words in a sliding window over stdin."""

import argparse
import os
import sys
from pathlib import Path

from .config import CloudConfig, ConfigError
from .driver import run
from .sink import ConsoleSink, JsonLinesSink, StreamSink
from .tracker import WordCloudTracker


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print the most frequent words among the last N words read",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cat book.txt | %(prog)s                       # Top 10 over a 100-word window
  cat book.txt | %(prog)s -c 5 -m 4 -w 1000     # Top 5 words of 4+ letters
  %(prog)s --input book.txt --format json       # One JSON array per line
  %(prog)s --config cloud.yml -w 50             # File settings, CLI override
  yes hello | %(prog)s -w 3 | head -n 2         # Stops cleanly when head exits
        """,
    )

    parser.add_argument(
        "-c",
        "--cloudSize",
        "--cloud-size",
        dest="cloud_size",
        type=int,
        metavar="N",
        help="Number of words per ranking (default: 10)",
    )
    parser.add_argument(
        "-m",
        "--minLength",
        "--min-length",
        dest="min_length",
        type=int,
        metavar="N",
        help="Ignore words shorter than this (default: 1)",
    )
    parser.add_argument(
        "-w",
        "--windowSize",
        "--window-size",
        dest="window_size",
        type=int,
        metavar="N",
        help="Number of recent words to consider (default: 100)",
    )

    # Sources
    parser.add_argument("--config", type=Path, help="YAML file with cloudSize/minLength/windowSize")
    parser.add_argument("-i", "--input", type=Path, help="Read words from file instead of stdin")

    # Output
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format for each ranking (default: text)",
    )
    parser.add_argument(
        "--stats", action="store_true", help="Print a run summary to stderr when done"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the word cloud."""
    parser = _build_parser()
    # Unrecognized flags are ignored
    args, _unknown = parser.parse_known_args(argv)

    if args.config is not None and not args.config.exists():
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1
    if args.input is not None and not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    try:
        config = load_config(args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sink: StreamSink = JsonLinesSink() if args.format == "json" else ConsoleSink()
    tracker = WordCloudTracker(config, sink)

    try:
        if args.input is not None:
            with open(args.input) as f:
                stats = run(f, tracker)
        else:
            stats = run(sys.stdin, tracker)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Failed to read input: {e}", file=sys.stderr)
        return 1

    if sink.closed:
        _detach_stdout()

    if args.stats:
        print(stats.summary(), file=sys.stderr)

    return 0


def load_config(args: argparse.Namespace) -> CloudConfig:
    """Build the run configuration from an optional file plus CLI flags.

    Raises:
        ConfigError: If the file is malformed or a value is out of range.
    """
    config = CloudConfig.from_yaml(args.config) if args.config else CloudConfig()
    config = config.with_overrides(
        cloud_size=args.cloud_size,
        min_length=args.min_length,
        window_size=args.window_size,
    )
    config.validate()
    return config


def _detach_stdout() -> None:
    """Point stdout at devnull so the final flush at exit cannot fail again."""
    try:
        fd = sys.stdout.fileno()
    except (OSError, ValueError):
        # stdout without a real descriptor (e.g. captured in tests)
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


if __name__ == "__main__":
    sys.exit(main())
