"""Atomic per-file writes used while materializing a template."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path


def write_atomic(dest: Path, data: bytes, *, mode_source: Path | None = None) -> None:
    """Write ``data`` to a temporary sibling of ``dest`` and move it into place.

    A failure part-way leaves either the previous ``dest`` or nothing, never
    a truncated file. Permission bits are taken from ``mode_source`` when given.
    """
    fd, tmp_name = tempfile.mkstemp(prefix=f".{dest.name}.", suffix=".tmp", dir=dest.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        if mode_source is not None:
            shutil.copymode(mode_source, tmp_path)
        os.replace(tmp_path, dest)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def copy_atomic(source: Path, dest: Path) -> None:
    """Byte-for-byte copy of ``source`` with the same temp-then-rename guarantee."""
    fd, tmp_name = tempfile.mkstemp(prefix=f".{dest.name}.", suffix=".tmp", dir=dest.parent)
    tmp_path = Path(tmp_name)
    try:
        with open(source, "rb") as src, os.fdopen(fd, "wb") as dst:
            shutil.copyfileobj(src, dst)
        shutil.copystat(source, tmp_path)
        os.replace(tmp_path, dest)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


__all__ = ["copy_atomic", "write_atomic"]
