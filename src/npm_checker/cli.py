"""Command line entrypoint.

Usage:
  npm-checker [directory] [package ...] [--mode shallow|exhaustive] [--list path_or_url]
              [--json] [--warn-only] [--config path] [--log-level L] [--log-format F]

Packages given on the command line replace the downloaded compromised list.
Without a directory the tool asks for one interactively, along with the check
type.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from collections.abc import Callable
from dataclasses import replace
from pathlib import Path

from .config import load_settings
from .core import scan_repository, validate_target
from .errors import CheckerError
from .ingestion import load_patterns
from .logging import LOG_FORMATS, setup_logging
from .models import CheckMode
from .report import aggregate
from .summary import render_settings_banner, render_text

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_FINDINGS = 10

_CHECK_TYPE_CHOICES = {"1": CheckMode.SHALLOW, "2": CheckMode.EXHAUSTIVE}

_CHECK_TYPE_MENU = (
    "\nCheck types:\n"
    "1. Shallow check - Only check lock files (faster, checks installed dependencies)\n"
    "2. Exhaustive check - Scan all files in project (slower, finds all references)\n"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="npm-checker",
        description="Find references to compromised npm packages in a project tree.",
    )
    parser.add_argument("directory", nargs="?", default=None, help="Project directory to scan")
    parser.add_argument(
        "packages",
        nargs="*",
        help="Package names to search for (defaults to the compromised package feed)",
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in CheckMode],
        default=None,
        help="shallow: lock files only; exhaustive: all recognised files (default)",
    )
    parser.add_argument(
        "--list",
        dest="list_source",
        default=None,
        help="URL or path of a package list (.csv, .json or one name per line)",
    )
    parser.add_argument("--json", action="store_true", help="Print a JSON report")
    parser.add_argument("--warn-only", action="store_true", help="Exit 0 even when matches exist")
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON config file")
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--log-format", choices=LOG_FORMATS, default=None)
    return parser


def _ask(prompt: Callable[[str], str], message: str, to_stderr: bool) -> str:
    """Read one answer; with a JSON report on stdout the question goes to stderr."""
    try:
        if to_stderr:
            print(message, end="", file=sys.stderr, flush=True)
            return prompt("").strip()
        return prompt(message).strip()
    except (EOFError, KeyboardInterrupt) as exc:
        raise CheckerError("No input received.") from exc


def _select_mode(
    args: argparse.Namespace, interactive: bool, prompt: Callable[[str], str]
) -> CheckMode:
    if args.mode:
        return CheckMode(args.mode)
    if not interactive:
        return CheckMode.EXHAUSTIVE
    print(_CHECK_TYPE_MENU, file=sys.stderr if args.json else sys.stdout)
    choice = _ask(prompt, "Select check type (1 or 2): ", args.json)
    if choice not in _CHECK_TYPE_CHOICES:
        raise CheckerError("Invalid choice. Please select 1 or 2.")
    return _CHECK_TYPE_CHOICES[choice]


def _warn_only_from_env() -> bool:
    return os.getenv("NPM_CHECKER_WARN_ONLY", "").strip().lower() in {"1", "true", "yes", "y"}


def main(argv: list[str] | None = None, prompt: Callable[[str], str] = input) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
        if args.log_level:
            settings = replace(settings, log_level=args.log_level)
        if args.log_format:
            settings = replace(settings, log_format=args.log_format)
    except CheckerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    setup_logging(settings.log_level, settings.log_format)

    try:
        if args.packages:
            patterns = list(args.packages)
        else:
            patterns = load_patterns(
                args.list_source, feed_url=settings.feed_url, timeout=settings.http_timeout
            )
            if not args.json:
                print(render_settings_banner(patterns))

        interactive = args.directory is None
        if interactive:
            directory = _ask(prompt, "Enter the path to the project directory: ", args.json)
        else:
            directory = args.directory
        target = validate_target(directory)
        mode = _select_mode(args, interactive, prompt)

        if not args.json:
            print(f"Scanning directory: {target}")
            print(f"Checking for {len(patterns)} packages ({mode.value} check)\n")

        results = scan_repository(target, patterns, mode)
    except CheckerError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if args.json:
        print(json.dumps(aggregate(results, mode), indent=2))
    else:
        print(render_text(results), end="")

    if results and not (args.warn_only or _warn_only_from_env()):
        return EXIT_FINDINGS
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
