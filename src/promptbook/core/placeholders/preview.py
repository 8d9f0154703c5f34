"""Preview rendering for partially filled prompt templates."""

from __future__ import annotations

import html
import re
from typing import List, Mapping, Optional, Sequence

from src.promptbook.core.color_schemes import PreviewColorScheme, preview_colors

from .models import PreviewSegment
from .parser import PLACEHOLDER_PATTERN, is_blank, parse_match, resolve_value


def create_preview(text: Optional[str], values: Optional[Mapping[str, str]]) -> str:
    """Return ``text`` with placeholders substituted.

    Placeholders that end up without a value are shown as their key in double
    quotes so the gap stays visible.
    """

    def _replace(match: re.Match[str]) -> str:
        parsed = parse_match(match.group(1))
        value = resolve_value(parsed, values)
        if is_blank(value):
            return f'"{parsed.key}"'
        return value

    return PLACEHOLDER_PATTERN.sub(_replace, text or "")


def create_annotated_preview(text: Optional[str], values: Optional[Mapping[str, str]]) -> List[PreviewSegment]:
    """Split ``text`` into literal and placeholder segments.

    Unfilled placeholders render as ``[key]``.
    """

    content = text or ""
    segments: List[PreviewSegment] = []
    last = 0
    for match in PLACEHOLDER_PATTERN.finditer(content):
        start, end = match.span()
        if start > last:
            segments.append(PreviewSegment(text=content[last:start]))

        parsed = parse_match(match.group(1))
        value = resolve_value(parsed, values)
        filled = not is_blank(value)
        segments.append(
            PreviewSegment(
                text=value if filled else f"[{parsed.key}]",
                is_placeholder=True,
                is_filled=filled,
            )
        )
        last = end

    if last < len(content):
        segments.append(PreviewSegment(text=content[last:]))
    return segments


def render_segments_html(segments: Sequence[PreviewSegment]) -> str:
    """Return HTML for annotated segments, escaping all text."""

    parts: List[str] = []
    for segment in segments:
        escaped = html.escape(segment.text)
        if not segment.is_placeholder:
            parts.append(escaped)
            continue
        state = "filled" if segment.is_filled else "empty"
        parts.append(f'<span class="placeholder {state}">{escaped}</span>')
    return "".join(parts)


def build_preview_styles(scheme: Optional[PreviewColorScheme] = None) -> str:
    """Return CSS styles for the preview widget in the given colour scheme."""

    filled = preview_colors(True, scheme)
    empty = preview_colors(False, scheme)
    return f"""
<style>
.placeholder {{
    padding: 0 2px;
    border-radius: 3px;
}}
.placeholder.filled {{
    background-color: {filled.background};
    color: {filled.text};
}}
.placeholder.empty {{
    background-color: {empty.background};
    color: {empty.text};
    font-weight: 600;
}}
pre {{
    white-space: pre-wrap;
    font-family: "JetBrains Mono", "Courier New", monospace;
}}
</style>
"""


__all__ = [
    "build_preview_styles",
    "create_annotated_preview",
    "create_preview",
    "render_segments_html",
]
