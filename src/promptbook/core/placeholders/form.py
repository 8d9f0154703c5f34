"""Value-map helpers backing the placeholder fill form."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, MutableMapping

from .models import Placeholder
from .parser import is_blank


def initial_values(placeholders: Iterable[Placeholder]) -> Dict[str, str]:
    """Return the starting form values: defaults for text, empty for dropdowns."""

    return {
        placeholder.key: "" if placeholder.is_dropdown else placeholder.default_value
        for placeholder in placeholders
    }


def restore_defaults(values: MutableMapping[str, str], placeholders: Iterable[Placeholder]) -> None:
    """Reset ``values`` in place to :func:`initial_values`."""

    values.update(initial_values(placeholders))


def missing_keys(placeholders: Iterable[Placeholder], values: Mapping[str, str]) -> List[str]:
    """Return keys that would be substituted with an empty string."""

    return [
        placeholder.key
        for placeholder in placeholders
        if is_blank(values.get(placeholder.key)) and is_blank(placeholder.default_value)
    ]


__all__ = ["initial_values", "missing_keys", "restore_defaults"]
