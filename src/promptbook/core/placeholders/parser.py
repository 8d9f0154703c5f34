"""Bracket placeholder parsing, validation and substitution.

Template syntax::

    [Label]                 -> text input without default
    [Label=Default]         -> text input with default
    [Label=Opt1,Opt2,Opt3]  -> dropdown with an empty first choice
    [Label=<long or multi-line default>] -> multi-line text input

Every function here is total: malformed input degrades to literal text or to
an advisory warning from :func:`validate_placeholders`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from .models import Placeholder, PlaceholderKind

LOGGER = logging.getLogger(__name__)

# Shortest span from a "[" to the nearest following "]"; may cross lines.
PLACEHOLDER_PATTERN = re.compile(r"\[(.*?)]", re.DOTALL)

# Values longer than this (or containing a newline) get a multi-line input.
MULTILINE_THRESHOLD = 60


@dataclass(frozen=True, slots=True)
class ParsedMatch:
    """Classification of a single ``[...]`` expression."""

    key: str
    kind: PlaceholderKind
    default_value: str
    options: Tuple[str, ...] = ()

    def to_placeholder(self) -> Placeholder:
        return Placeholder(
            key=self.key,
            kind=self.kind,
            default_value=self.default_value,
            options=self.options,
        )


def parse_match(inner: str) -> ParsedMatch:
    """Classify the text between the brackets of one expression.

    Only the first ``=`` separates the label from its value text. A dropdown
    needs at least two comma separated options, none of them blank.
    """

    label, sep, rest = inner.strip().partition("=")
    key = label.strip()
    if not sep:
        return ParsedMatch(key=key, kind=PlaceholderKind.TEXT, default_value="")

    choices = [part.strip() for part in rest.split(",")]
    if len(choices) >= 2 and all(choices):
        return ParsedMatch(
            key=key,
            kind=PlaceholderKind.DROPDOWN,
            default_value="",
            options=("", *choices),
        )

    if len(rest) > MULTILINE_THRESHOLD or "\n" in rest:
        return ParsedMatch(key=key, kind=PlaceholderKind.MULTILINE_TEXT, default_value=rest.strip())

    return ParsedMatch(key=key, kind=PlaceholderKind.TEXT, default_value=rest.strip())


def is_blank(value: Optional[str]) -> bool:
    """Return True for ``None``, empty and whitespace-only strings."""

    return not (value or "").strip()


def resolve_value(parsed: ParsedMatch, values: Optional[Mapping[str, str]]) -> str:
    """Pick the live value for ``parsed``, falling back to its inline default."""

    candidate = (values or {}).get(parsed.key)
    if not is_blank(candidate):
        return candidate
    return parsed.default_value


def extract_placeholders(text: Optional[str]) -> List[Placeholder]:
    """Return one placeholder per distinct non-empty key, in first-seen order.

    When a key occurs more than once, its first occurrence decides the kind,
    default and options.
    """

    found: Dict[str, Placeholder] = {}
    for match in PLACEHOLDER_PATTERN.finditer(text or ""):
        parsed = parse_match(match.group(1))
        if not parsed.key or parsed.key in found:
            continue
        found[parsed.key] = parsed.to_placeholder()

    LOGGER.debug("Extracted %d placeholder(s)", len(found))
    return list(found.values())


def fill_placeholders(text: Optional[str], values: Optional[Mapping[str, str]]) -> str:
    """Replace every expression with its live value or inline default.

    Occurrences are substituted independently, so a repeated key without a
    live value keeps each occurrence's own default.
    """

    def _replace(match: re.Match[str]) -> str:
        return resolve_value(parse_match(match.group(1)), values)

    return PLACEHOLDER_PATTERN.sub(_replace, text or "")


def validate_placeholders(text: Optional[str]) -> List[str]:
    """Return advisory warnings about the placeholder syntax in ``text``."""

    content = text or ""
    warnings: List[str] = []

    open_count = content.count("[")
    close_count = content.count("]")
    if open_count != close_count:
        warnings.append(f"Unbalanced brackets: {open_count} × '[' vs. {close_count} × ']'")

    for match in PLACEHOLDER_PATTERN.finditer(content):
        inner = match.group(1).strip()
        if not inner:
            warnings.append("Empty placeholder found: []")
        elif inner.startswith("="):
            warnings.append(f"Placeholder without label: {match.group(0)}")

    return warnings


def has_placeholders(text: Optional[str]) -> bool:
    return PLACEHOLDER_PATTERN.search(text or "") is not None


def count_placeholders(text: Optional[str]) -> int:
    """Count every expression, including repeated and empty keys."""

    return sum(1 for _ in PLACEHOLDER_PATTERN.finditer(text or ""))


__all__ = [
    "MULTILINE_THRESHOLD",
    "PLACEHOLDER_PATTERN",
    "ParsedMatch",
    "count_placeholders",
    "extract_placeholders",
    "fill_placeholders",
    "has_placeholders",
    "is_blank",
    "parse_match",
    "resolve_value",
    "validate_placeholders",
]
