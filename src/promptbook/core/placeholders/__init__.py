"""Bracket placeholder engine for prompt templates."""

from .models import Placeholder, PlaceholderKind, PreviewSegment
from .parser import (
    MULTILINE_THRESHOLD,
    count_placeholders,
    extract_placeholders,
    fill_placeholders,
    has_placeholders,
    validate_placeholders,
)
from .preview import (
    build_preview_styles,
    create_annotated_preview,
    create_preview,
    render_segments_html,
)
from .form import initial_values, missing_keys, restore_defaults

__all__ = [
    "MULTILINE_THRESHOLD",
    "Placeholder",
    "PlaceholderKind",
    "PreviewSegment",
    "build_preview_styles",
    "count_placeholders",
    "create_annotated_preview",
    "create_preview",
    "extract_placeholders",
    "fill_placeholders",
    "has_placeholders",
    "initial_values",
    "missing_keys",
    "render_segments_html",
    "restore_defaults",
    "validate_placeholders",
]
