"""Recursive copy of the bundled template tree.

Directories are recreated in pre-order and recursed into before their
siblings; every other entry is copied byte-for-byte. ``OSError`` is never
caught here, so the first failure aborts the copy and leaves whatever was
already written in place.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path


def copy_tree(source: str | Path, destination: str | Path) -> list[Path]:
    """Copy every entry of *source* into the existing directory *destination*.

    Entries are visited in the order the filesystem reports them. Symbolic
    links are not followed when deciding whether an entry is a directory;
    a link to a file is copied as its target's contents.

    Args:
        source: Existing directory to copy from.
        destination: Existing, empty directory to copy into.

    Returns:
        Paths of the files written, in the order they were copied.
    """
    src = Path(source)
    dest = Path(destination)
    written: list[Path] = []

    with os.scandir(src) as entries:
        for entry in entries:
            target = dest / entry.name
            if entry.is_dir(follow_symlinks=False):
                target.mkdir()
                written.extend(copy_tree(entry.path, target))
            else:
                shutil.copyfile(entry.path, target)
                written.append(target)

    return written


def tree_snapshot(root: str | Path) -> dict[str, bytes]:
    """Return ``{relative_posix_path: contents}`` for every file under *root*.

    Empty directories appear with a trailing ``/`` and empty contents so that
    two snapshots compare equal only when the trees have the same shape.
    """
    base = Path(root)
    snapshot: dict[str, bytes] = {}
    for path in sorted(base.rglob("*")):
        rel = path.relative_to(base).as_posix()
        if path.is_dir():
            if not any(path.iterdir()):
                snapshot[rel + "/"] = b""
        else:
            snapshot[rel] = path.read_bytes()
    return snapshot
