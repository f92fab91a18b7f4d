"""API key placeholder substitution."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlaceholderRule:
    literal: str

    def matches(self, code: str) -> bool:
        return self.literal in code

    def apply(self, code: str, secret: str) -> str:
        return code.replace(self.literal, secret, 1)


# Evaluated top to bottom; keep this order.
PLACEHOLDER_RULES: tuple[PlaceholderRule, ...] = (
    PlaceholderRule("YOUR_API_KEY"),
    PlaceholderRule("<<apiKey>>"),
    PlaceholderRule("YOUR_TOKEN"),
    PlaceholderRule("<YOUR API KEY>"),
    PlaceholderRule("<apiKey>"),
)


def find_placeholder(code: str, rules: tuple[PlaceholderRule, ...] = PLACEHOLDER_RULES) -> PlaceholderRule | None:
    for rule in rules:
        if rule.matches(code):
            return rule
    return None


def substitute_placeholder(
    code: str,
    secret: str,
    rules: tuple[PlaceholderRule, ...] = PLACEHOLDER_RULES,
) -> str:
    """Replace the first occurrence of the first matching placeholder.

    Snippets without a known placeholder are returned unchanged.
    """
    rule = find_placeholder(code, rules)
    if rule is None:
        return code
    return rule.apply(code, secret)
