"""Task name derivation and uniqueness."""

import re
from typing import Callable

FALLBACK_NAME = "task"

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Convert a title to a filesystem-safe slug.

    "Fix Bug!" → "fix-bug", "  " → ""
    """
    slug = _NON_ALNUM.sub("-", text.lower())
    return slug.strip("-")


def ensure_unique(base: str, taken: Callable[[str], bool]) -> str:
    """Return base, or the first of base-2, base-3, ... that is not taken.

    An empty base is replaced by "task" before probing.
    """
    base = base or FALLBACK_NAME
    candidate = base
    counter = 1
    while taken(candidate):
        counter += 1
        candidate = f"{base}-{counter}"
    return candidate
