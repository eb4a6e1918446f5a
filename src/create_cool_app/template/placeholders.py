"""``${token}`` substitution for the package manifest and readme."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, Optional

from create_cool_app.core.config import REPLACEABLE_FILES

PLACEHOLDER_PATTERN = re.compile(r"\$\{\s*(\w+?)\s*\}", re.IGNORECASE)

Resolver = Callable[[str], Optional[str]]


def is_replaceable(path: Path) -> bool:
    """True for files whose placeholders are rewritten (exact basename match)."""
    return path.name in REPLACEABLE_FILES


def substitute(content: str, resolver: Resolver, pattern: re.Pattern[str] = PLACEHOLDER_PATTERN) -> str:
    """Replace every recognized token in ``content`` in a single pass.

    ``resolver`` receives the identifier inside the delimiters. When it
    returns ``None`` the whole token, delimiters and inner whitespace
    included, is left exactly as written.
    """

    def _replace(match: re.Match[str]) -> str:
        value = resolver(match.group(1))
        return match.group(0) if value is None else value

    return pattern.sub(_replace, content)


__all__ = ["PLACEHOLDER_PATTERN", "Resolver", "is_replaceable", "substitute"]
