"""Name-based exclusion rules loaded from a ``.gitignore``-style file.

Only literal names are matched; glob syntax and anchoring are not interpreted.
Lines starting with ``!`` are collected separately as re-included names.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDES: tuple[str, ...] = (".git", ".idea")
DEFAULT_IGNORE_FILE = Path(".gitignore")
NEGATE_PREFIX = "!"


@dataclass(frozen=True)
class ExclusionSet:
    """Excluded and re-included names for one listing run.

    ``included`` is only consulted when ``honor_negation`` is set; otherwise a
    negated line has no effect on filtering.
    """

    excluded: tuple[str, ...] = DEFAULT_EXCLUDES
    included: tuple[str, ...] = ()
    honor_negation: bool = False

    def is_excluded(self, name: str) -> bool:
        """Return whether entries called ``name`` are skipped and not descended."""
        if name not in self.excluded:
            return False
        if self.honor_negation and name in self.included:
            return False
        return True


def parse_ignore_text(text: str) -> tuple[list[str], list[str]]:
    """Split ignore-file text into ``(excluded, included)`` name lists.

    Surrounding newlines are trimmed from the whole blob before splitting.
    Empty lines are skipped and order is preserved without deduplication.
    """
    excluded: list[str] = []
    included: list[str] = []
    for raw_line in text.strip("\n\r").split("\n"):
        line = raw_line.rstrip("\r")
        if not line:
            continue
        if line.startswith(NEGATE_PREFIX):
            included.append(line[len(NEGATE_PREFIX):])
            continue
        excluded.append(line)
    return excluded, included


def read_ignore_text(ignore_file: Path) -> str | None:
    """Return ignore-file text, or ``None`` when it cannot be read."""
    try:
        return ignore_file.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.debug("Ignore file %s not read: %s", ignore_file, exc)
        return None


def load_exclusion_set(
    ignore_file: Path | None = DEFAULT_IGNORE_FILE,
    defaults: Iterable[str] = DEFAULT_EXCLUDES,
    extra: Iterable[str] = (),
    honor_negation: bool = False,
) -> ExclusionSet:
    """Build the exclusion set from defaults, ``extra`` names and ``ignore_file``.

    A missing or unreadable ignore file is the normal "no ignore file" case and
    leaves only the defaults. Passing ``ignore_file=None`` skips reading.
    """
    excluded = [*defaults, *extra]
    included: list[str] = []
    text = read_ignore_text(ignore_file) if ignore_file is not None else None
    if text is not None:
        file_excluded, file_included = parse_ignore_text(text)
        excluded.extend(file_excluded)
        included.extend(file_included)
        logger.debug(
            "Loaded %d excluded and %d included names from %s",
            len(file_excluded),
            len(file_included),
            ignore_file,
        )
    return ExclusionSet(
        excluded=tuple(excluded),
        included=tuple(included),
        honor_negation=honor_negation,
    )


__all__ = [
    "DEFAULT_EXCLUDES",
    "DEFAULT_IGNORE_FILE",
    "ExclusionSet",
    "parse_ignore_text",
    "read_ignore_text",
    "load_exclusion_set",
]
