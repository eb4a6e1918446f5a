"""Which template entries are skipped or renamed on copy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from create_cool_app.core.config import EXCLUDED_ENTRIES, RENAMED_ENTRIES


class CopyAction(str, Enum):
    SKIP = "skip"
    RENAME = "rename"
    KEEP = "keep"


@dataclass(frozen=True)
class CopyDecision:
    action: CopyAction
    target_name: str | None = None

    @property
    def skipped(self) -> bool:
        return self.action is CopyAction.SKIP


def classify(
    name: str,
    *,
    excluded: frozenset[str] = EXCLUDED_ENTRIES,
    renamed: Mapping[str, str] = RENAMED_ENTRIES,
) -> CopyDecision:
    """Decide what happens to a single directory entry called ``name``.

    Build artifacts and lockfiles are skipped; ``_gitignore`` is published
    as ``.gitignore`` since packaged templates cannot ship dot-files reliably.
    The rule looks at the entry name only, so it applies the same way at
    every depth of the tree.
    """
    if name in excluded:
        return CopyDecision(CopyAction.SKIP)
    if name in renamed:
        return CopyDecision(CopyAction.RENAME, renamed[name])
    return CopyDecision(CopyAction.KEEP, name)


__all__ = ["CopyAction", "CopyDecision", "classify"]
