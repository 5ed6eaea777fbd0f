#!/usr/bin/env python3
"""
cli.py: Command line entry point for textmatcher.

Commands:
1. match: Match a selection in a file (or the clipboard) and print the result
2. config: Show the effective configuration or write a sample .textmatcher.yml
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .config import LOG_LEVELS, config
from .exceptions import TextMatcherError
from .logging_config import get_logger, set_log_level
from .text_buffer import InMemoryBuffer, TextSelection
from .text_matcher import TextMatcher
from .yaml_config import resolve_column_policy, resolve_log_level, write_sample_config

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textmatcher",
        description="""
Extract the text covered by an editor selection.

Positions are zero-based LINE:COLUMN pairs and the end column is inclusive.
An empty selection (no positions, or equal start and end) reads the clipboard.

Examples:
  textmatcher match notes.txt --start 0:1 --end 2:1
  textmatcher match notes.txt --json
  textmatcher config --init .
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    sub = parser.add_subparsers(
        dest="cmd",
        required=True,
        title="commands",
        help="Run 'textmatcher <command> --help' for detailed usage",
    )

    p_m = sub.add_parser("match", help="Match a selection and print the selected text")
    p_m.add_argument("file", help="File holding the buffer text")
    p_m.add_argument("--start", metavar="LINE:COLUMN", help="Selection start")
    p_m.add_argument("--end", metavar="LINE:COLUMN", help="Selection end (inclusive)")
    p_m.add_argument(
        "--policy",
        choices=["strict", "clamp"],
        help="Out-of-range handling (default: from environment or .textmatcher.yml)",
    )
    p_m.add_argument("--encoding", help="File encoding (default: %(default)s)",
                     default=config.matcher.BUFFER_ENCODING)
    p_m.add_argument("--json", action="store_true", help="Print the full match result as JSON")
    p_m.add_argument("--config-dir", default=".", help="Directory holding .textmatcher.yml")
    p_m.add_argument(
        "--log-level",
        type=str.upper,
        choices=list(LOG_LEVELS),
        help="Override the log level",
    )

    p_c = sub.add_parser("config", help="Show configuration or write a sample file")
    p_c.add_argument("--init", metavar="DIR", help="Write a sample .textmatcher.yml into DIR")
    p_c.add_argument("--force", action="store_true", help="Overwrite an existing file with --init")

    return parser


def run_match(args: argparse.Namespace) -> int:
    set_log_level(args.log_level or resolve_log_level(args.config_dir))
    policy = args.policy or resolve_column_policy(args.config_dir)

    try:
        buffer = InMemoryBuffer.from_file(args.file, encoding=args.encoding)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    selection = TextSelection.parse(args.start, args.end)
    logger.info(f"Matching {selection} in {args.file} with {policy} policy")
    result = TextMatcher(column_policy=policy, encoding=args.encoding).match(selection, buffer)

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        sys.stdout.write(result.selected_text)
        if not result.selected_text.endswith("\n"):
            sys.stdout.write("\n")
    return 0


def run_config(args: argparse.Namespace) -> int:
    if args.init:
        path = write_sample_config(Path(args.init), overwrite=args.force)
        print(f"Wrote {path}")
    else:
        print(config.get_summary())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the textmatcher CLI.

    Returns:
        Process exit status: 0 on success, 1 when matching or configuration fails
    """
    args = build_parser().parse_args(argv)

    try:
        if args.cmd == "match":
            return run_match(args)
        return run_config(args)
    except TextMatcherError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
