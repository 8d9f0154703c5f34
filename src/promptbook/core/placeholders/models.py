"""Placeholder data structures produced by the template engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class PlaceholderKind(str, Enum):
    """Input widget family a placeholder is rendered with."""

    TEXT = "text"
    MULTILINE_TEXT = "multiline_text"
    DROPDOWN = "dropdown"


@dataclass(frozen=True, slots=True)
class Placeholder:
    """Describe one named slot declared in a prompt template.

    ``options`` is only populated for dropdowns and always starts with the
    empty choice. ``default_value`` is always empty for dropdowns.
    """

    key: str
    kind: PlaceholderKind = PlaceholderKind.TEXT
    default_value: str = ""
    options: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_dropdown(self) -> bool:
        return self.kind is PlaceholderKind.DROPDOWN

    @property
    def is_multiline(self) -> bool:
        return self.kind is PlaceholderKind.MULTILINE_TEXT


@dataclass(frozen=True, slots=True)
class PreviewSegment:
    """A contiguous run of an annotated preview."""

    text: str
    is_placeholder: bool = False
    is_filled: bool = False


__all__ = ["Placeholder", "PlaceholderKind", "PreviewSegment"]
