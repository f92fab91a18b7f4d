"""Snippet extraction and preparation."""

from docsmoke.snippets.extractor import parse_content, parse_file
from docsmoke.snippets.placeholders import PLACEHOLDER_RULES, PlaceholderRule, find_placeholder, substitute_placeholder

__all__ = [
    "PLACEHOLDER_RULES",
    "PlaceholderRule",
    "find_placeholder",
    "parse_content",
    "parse_file",
    "substitute_placeholder",
]
