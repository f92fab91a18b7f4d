"""Command-line entry point for docsmoke."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from docsmoke.__about__ import DEFAULT_LANGUAGE, __version__
from docsmoke.config import load_settings, resolve_log_level
from docsmoke.core.errors import DocsmokeError
from docsmoke.core.results import RunTally
from docsmoke.execution import Executor, RizaExecutor
from docsmoke.providers import supported_languages
from docsmoke.runner import SnippetRunner
from docsmoke.snippets.extractor import parse_file

logger = logging.getLogger("docsmoke")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docsmoke",
        description="Run the code snippets of a provider's documentation in a Riza sandbox.",
    )
    parser.add_argument("provider", nargs="?", help="provider name; reads <provider>.txt by default")
    parser.add_argument(
        "language",
        nargs="?",
        default=DEFAULT_LANGUAGE,
        choices=supported_languages(),
        help=f"snippet language (default: {DEFAULT_LANGUAGE})",
    )
    parser.add_argument("--file", type=Path, default=None, help="documentation file to read instead of <provider>.txt")
    parser.add_argument("--delay", type=float, default=None, help="seconds to wait between snippets (default: 1)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool) -> None:
    level = resolve_log_level(verbose)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


async def run(args: argparse.Namespace, *, executor: Executor | None = None) -> RunTally:
    settings = load_settings(args.provider, args.language, document=args.file, delay=args.delay)
    snippets = parse_file(settings.document, settings.language)
    logger.info("found %d %s snippets in %s", len(snippets), settings.language, settings.document)
    runner = SnippetRunner.from_settings(settings, executor or RizaExecutor())
    return await runner.run(snippets)


def main(argv: Sequence[str] | None = None, *, executor: Executor | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        configure_logging(args.verbose)
        tally = asyncio.run(run(args, executor=executor))
    except DocsmokeError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 1 if tally.failed else 0
