"""
Component name normalization.

Canonical names are PascalCase (``AlertDialog``) and come from the remote
listing. Local sources are stored under kebab-case directory names
(``alert-dialog``). Only the forward mapping exists: directory names are
never turned back into canonical names.
"""

from __future__ import annotations

import re

# Lower/digit followed by upper: "AlertDialog" -> "Alert-Dialog"
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
# Capital run followed by a word: "ABTest" -> "AB-Test"
_ACRONYM_BOUNDARY = re.compile(r"([A-Z])([A-Z][a-z])")

# Corrections applied to the hyphenated, lowercased name. Each entry is
# (detected pattern, replacement). Add entries here for new irregular names
# instead of changing the boundary rules above.
DIRECTORY_NAME_OVERRIDES: list[tuple[re.Pattern[str], str]] = [
    # Single leading capital: "h-stack" -> "hstack", "v-stack" -> "vstack"
    (re.compile(r"^([^-])-"), r"\1"),
]


def hyphenate(canonical: str) -> str:
    """Apply the boundary rules only, without overrides."""
    name = _CAMEL_BOUNDARY.sub(r"\1-\2", canonical)
    name = _ACRONYM_BOUNDARY.sub(r"\1-\2", name)
    return name.lower()


def to_directory_name(canonical: str) -> str:
    """Map a canonical PascalCase component name to its directory name.

    >>> to_directory_name("AlertDialog")
    'alert-dialog'
    >>> to_directory_name("HStack")
    'hstack'
    """
    name = hyphenate(canonical)
    for pattern, replacement in DIRECTORY_NAME_OVERRIDES:
        name = pattern.sub(replacement, name, count=1)
    return name
