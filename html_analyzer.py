"""
HTML Analyzer: prints the text found at the deepest tag nesting of a web page.

Usage:
    python html_analyzer.py <url>
"""

import asyncio
import logging
import sys

from analyzer.config import Config
from analyzer.fetcher import FetchError, fetch_document
from analyzer.pipeline import Outcome, analyze

log = logging.getLogger("html-analyzer.cli")

USAGE = "Usage: python html_analyzer.py <url>"


def run(url: str) -> int:
    """Fetch url, analyze it, and report the result. Returns the exit code."""
    try:
        policy = Config.depth_policy()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return Config.EXIT_FAILURE

    try:
        body = asyncio.run(fetch_document(url))
    except FetchError as e:
        print(str(e), file=sys.stderr)
        return Config.EXIT_FAILURE

    result = analyze(body, policy=policy, validate=Config.VALIDATE)
    log.debug(f"Analysis of {url}: {result.to_dict()}")

    if result.outcome is Outcome.FOUND:
        print(result.text)
        return Config.EXIT_OK
    if result.outcome is Outcome.MALFORMED:
        print("malformed HTML", file=sys.stderr)
    else:
        print("no text content available", file=sys.stderr)
    return Config.EXIT_FAILURE


def main(argv=None) -> int:
    """Entry point for the command line."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return Config.EXIT_USAGE
    return run(args[0])


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
