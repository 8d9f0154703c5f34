"""Dialogs for the Promptbook UI."""

from .placeholder_dialog import PlaceholderDialog

__all__ = ["PlaceholderDialog"]
