"""Fenced code block extraction."""

from __future__ import annotations

import logging
from pathlib import Path

from docsmoke.providers import fence_tag

logger = logging.getLogger(__name__)

FENCE = "```"


def parse_content(content: str, language: str) -> list[str]:
    """Return the bodies of ```<language> blocks in order of appearance.

    Markers are compared against the stripped line, body lines are kept
    verbatim. An opening marker seen inside a block is dropped without
    restarting the block. A block still open at end of input is discarded.
    """
    opening = f"{FENCE}{fence_tag(language)}"
    blocks: list[str] = []
    current: list[str] = []
    inside = False

    for line in content.split("\n"):
        marker = line.strip()
        if marker == opening:
            inside = True
            continue
        if marker == FENCE and inside:
            inside = False
            blocks.append("\n".join(current))
            current = []
            continue
        if inside:
            current.append(line)

    if inside:
        logger.warning("Found unclosed %s code block", language)

    return blocks


def parse_file(path: str | Path, language: str) -> list[str]:
    """Read a document and extract its snippets; unreadable files yield none.

    Undecodable bytes are replaced rather than failing the whole document.
    """
    try:
        content = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.error("Error reading file %s: %s", path, exc)
        return []
    return parse_content(content, language)
