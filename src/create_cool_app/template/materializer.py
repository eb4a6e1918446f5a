"""Copy a template tree into a project root, applying the copy policy."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional

from create_cool_app.errors import TemplateEncodingError, TemplateLayoutError
from create_cool_app.template.files import copy_atomic, write_atomic
from create_cool_app.template.placeholders import is_replaceable
from create_cool_app.template.policy import classify

logger = logging.getLogger(__name__)

Transform = Callable[[str], str]


@dataclass(frozen=True)
class CopyEntry:
    """One planned copy operation."""

    source: Path
    destination: Path
    is_dir: bool

    @property
    def replaceable(self) -> bool:
        return not self.is_dir and is_replaceable(self.destination)


@dataclass
class MaterializeResult:
    project_root: Path
    plan: List[CopyEntry] = field(default_factory=list)
    copied: List[Path] = field(default_factory=list)
    substituted: List[Path] = field(default_factory=list)


def build_copy_plan(template_root: Path, dest_root: Path) -> List[CopyEntry]:
    """List every (source, destination) pair in copy order.

    Entries are visited in name order; a directory is listed before its
    contents. Skipped entries are never descended into.

    Raises:
        FileNotFoundError: ``template_root`` is not a directory.
        TemplateLayoutError: two entries of one directory map to the same name.
    """
    if not template_root.is_dir():
        raise FileNotFoundError(f"Template directory not found at {template_root}")
    plan: List[CopyEntry] = []
    _plan_directory(template_root, dest_root, plan)
    return plan


def _plan_directory(source_dir: Path, dest_dir: Path, plan: List[CopyEntry]) -> None:
    seen: set[str] = set()
    for child in sorted(source_dir.iterdir(), key=lambda p: p.name):
        decision = classify(child.name)
        if decision.skipped or decision.target_name is None:
            logger.debug("Skipping %s", child)
            continue
        target_name = decision.target_name
        if target_name in seen:
            raise TemplateLayoutError(source_dir, target_name)
        seen.add(target_name)

        target = dest_dir / target_name
        if child.is_dir():
            plan.append(CopyEntry(child, target, is_dir=True))
            _plan_directory(child, target, plan)
        else:
            plan.append(CopyEntry(child, target, is_dir=False))


def materialize(
    template_root: Path,
    dest_root: Path,
    *,
    transform: Optional[Transform] = None,
) -> MaterializeResult:
    """Copy ``template_root`` into ``dest_root``.

    Replaceable files (manifest and readme) are decoded as UTF-8, passed
    through ``transform`` and written; everything else is copied byte for
    byte. Each file lands via a temporary sibling and an atomic rename.
    Nothing is rolled back if an ``OSError`` interrupts the copy.

    Raises:
        TemplateEncodingError: a replaceable file is not UTF-8. Checked
            before ``dest_root`` is touched.
    """
    plan = build_copy_plan(template_root, dest_root)
    result = MaterializeResult(project_root=dest_root, plan=plan)
    texts: Dict[Path, str] = {}
    if transform is not None:
        texts = {entry.source: _read_text(entry.source) for entry in plan if entry.replaceable}

    dest_root.mkdir(parents=True, exist_ok=True)
    for entry in plan:
        if entry.is_dir:
            entry.destination.mkdir(parents=True, exist_ok=True)
            continue
        if entry.replaceable and transform is not None:
            write_atomic(entry.destination, transform(texts[entry.source]).encode("utf-8"), mode_source=entry.source)
            result.substituted.append(entry.destination)
        else:
            copy_atomic(entry.source, entry.destination)
        result.copied.append(entry.destination)

    logger.info(
        "Materialized %d files from %s into %s (%d rewritten)",
        len(result.copied),
        template_root,
        dest_root,
        len(result.substituted),
    )
    return result


def _read_text(path: Path) -> str:
    try:
        return path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TemplateEncodingError(path, str(exc)) from exc


__all__ = ["CopyEntry", "MaterializeResult", "Transform", "build_copy_plan", "materialize"]
