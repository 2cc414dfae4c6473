"""Domain datatypes for emitted listing entries."""

from __future__ import annotations

from dataclasses import dataclass

KIND_FILE = "F"
KIND_DIRECTORY = "D"

TYPE_FILTER_FILE = "file"
TYPE_FILTER_DIR = "dir"


@dataclass(frozen=True)
class Entry:
    """One listed filesystem item as observed during a directory scan."""

    kind: str
    permissions: str
    size: int
    path: str

    def format(self) -> str:
        """Return the tab-separated ``KIND PERMS SIZE PATH`` output line."""
        return f"{self.kind}\t{self.permissions}\t{self.size}\t{self.path}"


def normalize_type_filter(value: str | None) -> str | None:
    """Map a raw ``--type`` value onto ``"dir"`` or ``"file"``.

    Anything other than ``dir`` (case-insensitive) selects files. ``None``
    means no filter.
    """
    if value is None:
        return None
    if value.strip().lower() == TYPE_FILTER_DIR:
        return TYPE_FILTER_DIR
    return TYPE_FILTER_FILE


def kind_matches_filter(kind: str, type_filter: str | None) -> bool:
    """Return whether an entry of ``kind`` is emitted under ``type_filter``."""
    if type_filter is None:
        return True
    if type_filter == TYPE_FILTER_DIR:
        return kind == KIND_DIRECTORY
    return kind == KIND_FILE


__all__ = [
    "KIND_FILE",
    "KIND_DIRECTORY",
    "TYPE_FILTER_FILE",
    "TYPE_FILTER_DIR",
    "Entry",
    "normalize_type_filter",
    "kind_matches_filter",
]
