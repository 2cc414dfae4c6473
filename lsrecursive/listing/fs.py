"""Filesystem scanning and the recursive pre-order walker."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from ..exclusions import ExclusionSet
from .threshold import DEFAULT_LIMIT, SCOPE_CUMULATIVE, TraversalContext
from .types import KIND_DIRECTORY, KIND_FILE, Entry, kind_matches_filter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryChild:
    """One direct directory child with its ``lstat`` metadata."""

    name: str
    is_dir: bool
    mode: int
    size: int


def permission_string(mode: int) -> str:
    """Render permission bits as ``-rwxr-xr-x``.

    The leading type column is always ``-``; only the nine permission bits
    are shown.
    """
    return stat.filemode(stat.S_IFREG | (mode & 0o777))


def join_listing_path(parent: str, name: str) -> str:
    """Join ``name`` under ``parent`` collapsing one leading ``./``.

    ``"."`` and ``"foo"`` give ``"foo"``; ``"./src"`` and ``"a"`` give
    ``"src/a"``. Trailing slashes on ``parent`` are collapsed first.
    """
    parent = parent.rstrip("/") or "/"
    prefix = parent if parent.endswith("/") else parent + "/"
    if prefix.startswith("./"):
        prefix = prefix[2:]
    return prefix + name


def scan_directory(directory: str) -> list[DirectoryChild]:
    """List direct children of ``directory`` sorted by name.

    Unreadable or missing directories yield ``[]``. Children whose metadata
    cannot be read are dropped. Symlinks are reported as files.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                try:
                    st = child.stat(follow_symlinks=False)
                except OSError as exc:
                    logger.debug("Skipping %s: %s", child.path, exc)
                    continue
                children.append(
                    DirectoryChild(
                        name=child.name,
                        is_dir=stat.S_ISDIR(st.st_mode),
                        mode=st.st_mode,
                        size=int(st.st_size),
                    )
                )
    except OSError as exc:
        logger.debug("Cannot list %s: %s", directory, exc)
        return []

    children.sort(key=lambda item: item.name)
    return children


def walk(
    path: str,
    exclusions: ExclusionSet,
    context: TraversalContext,
    type_filter: str | None = None,
    scan: Callable[[str], list[DirectoryChild]] = scan_directory,
) -> list[Entry]:
    """Recursively list ``path`` depth-first, pre-order.

    Direct entries of a directory come first, then each subdirectory's listing
    in name order. Excluded names are neither emitted nor descended. The type
    filter only affects emission, so filtered-out directories are still
    descended.
    """
    children = scan(path)
    if not context.admit(len(children)):
        return []

    items: list[Entry] = []
    directories: list[str] = []
    for child in children:
        if exclusions.is_excluded(child.name):
            continue
        kind = KIND_DIRECTORY if child.is_dir else KIND_FILE
        child_path = join_listing_path(path, child.name)
        if child.is_dir:
            directories.append(child_path)
        if not kind_matches_filter(kind, type_filter):
            continue
        items.append(
            Entry(
                kind=kind,
                permissions=permission_string(child.mode),
                size=child.size,
                path=child_path,
            )
        )

    for directory in directories:
        items.extend(walk(directory, exclusions, context, type_filter, scan))
    return items


def list_tree(
    root: str,
    exclusions: ExclusionSet,
    *,
    type_filter: str | None = None,
    limit: int = DEFAULT_LIMIT,
    scope: str = SCOPE_CUMULATIVE,
    assume_yes: bool = False,
    prompt: Callable[[], str] | None = None,
    stream: TextIO | None = None,
) -> list[Entry]:
    """Walk ``root`` with a fresh traversal context."""
    context = TraversalContext(
        limit=limit,
        scope=scope,
        assume_yes=assume_yes,
        prompt=prompt,
        stream=stream,
    )
    return walk(root, exclusions, context, type_filter)


__all__ = [
    "DirectoryChild",
    "permission_string",
    "join_listing_path",
    "scan_directory",
    "walk",
    "list_tree",
]
