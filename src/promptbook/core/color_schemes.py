"""Colour schemes used to mark filled and empty placeholders in previews."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


def argb_to_css(argb: int) -> str:
    """Convert a ``0xAARRGGBB`` colour into a CSS ``rgba()`` string."""

    alpha = (argb >> 24) & 0xFF
    red = (argb >> 16) & 0xFF
    green = (argb >> 8) & 0xFF
    blue = argb & 0xFF
    return f"rgba({red}, {green}, {blue}, {round(alpha / 255, 2)})"


@dataclass(frozen=True, slots=True)
class PreviewColors:
    """Background/text pair for one placeholder segment (CSS values)."""

    background: str
    text: str


class PreviewColorScheme(Enum):
    """Available preview palettes (empty bg, empty text, filled bg, filled text, label)."""

    RED_GREEN = (0x40F44336, 0xFFF44336, 0x4000C853, 0xFF00C853, "Red/Green")
    # Monochrome; also suits colour-blind users
    BLACK_WHITE = (0x40757575, 0xFF757575, 0x40212121, 0xFF212121, "Black/White")
    # Dark mode
    WHITE_BLACK = (0x40BDBDBD, 0xFFBDBDBD, 0x40FFFFFF, 0xFFFFFFFF, "White/Black (inverted)")
    BLUE_ORANGE = (0x402196F3, 0xFF2196F3, 0x40FF9800, 0xFFFF9800, "Blue/Orange")

    def __init__(self, empty_background: int, empty_text: int, filled_background: int, filled_text: int, display_name: str) -> None:
        self.empty_background = empty_background
        self.empty_text = empty_text
        self.filled_background = filled_background
        self.filled_text = filled_text
        self.display_name = display_name

    @classmethod
    def default(cls) -> "PreviewColorScheme":
        return cls.RED_GREEN

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional["PreviewColorScheme"]:
        """Look a scheme up by its enum name; unknown names return ``None``."""

        return cls.__members__.get(name or "")


def preview_colors(is_filled: bool, scheme: Optional[PreviewColorScheme] = None) -> PreviewColors:
    """Return the colours for a placeholder segment in ``scheme``."""

    scheme = scheme or PreviewColorScheme.default()
    if is_filled:
        return PreviewColors(background=argb_to_css(scheme.filled_background), text=argb_to_css(scheme.filled_text))
    return PreviewColors(background=argb_to_css(scheme.empty_background), text=argb_to_css(scheme.empty_text))


__all__ = ["PreviewColorScheme", "PreviewColors", "argb_to_css", "preview_colors"]
