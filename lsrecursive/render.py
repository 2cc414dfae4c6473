"""Output line rendering for listing entries.

Lines are tab-separated; color only touches the kind tag so column
positions stay identical for downstream ``cut``/``awk`` use.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from pygments.console import colorize

from .listing.types import KIND_DIRECTORY, KIND_FILE, Entry

KIND_COLORS = {
    KIND_DIRECTORY: "blue",
    KIND_FILE: "green",
}


def render_entry(entry: Entry, color: bool = False) -> str:
    """Return the output line for ``entry``, optionally with a colored tag."""
    line = entry.format()
    if not color:
        return line
    color_key = KIND_COLORS.get(entry.kind)
    if color_key is None:
        return line
    return colorize(color_key, entry.kind) + line[len(entry.kind):]


def write_entries(entries: Iterable[Entry], stream: TextIO, color: bool = False) -> int:
    """Write one line per entry and return the number of lines written."""
    count = 0
    for entry in entries:
        stream.write(render_entry(entry, color))
        stream.write("\n")
        count += 1
    return count


__all__ = ["KIND_COLORS", "render_entry", "write_entries"]
