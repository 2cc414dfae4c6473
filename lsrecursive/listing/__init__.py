"""Recursive directory listing engine.

This package contains the non-CLI traversal pieces:
- entry datatypes and type-filter helpers
- filesystem scanning and the recursive pre-order walker
- the shared traversal context enforcing the confirmation threshold
"""

from __future__ import annotations

from .types import (
    KIND_DIRECTORY,
    KIND_FILE,
    TYPE_FILTER_DIR,
    TYPE_FILTER_FILE,
    Entry,
    kind_matches_filter,
    normalize_type_filter,
)
from .threshold import (
    CONFIRM_PROMPT,
    DEFAULT_LIMIT,
    MODE_CONFIRM,
    MODE_HALTED,
    MODE_WALK_THROUGH,
    SCOPE_CUMULATIVE,
    SCOPE_PER_DIRECTORY,
    TraversalContext,
)
from .fs import (
    DirectoryChild,
    join_listing_path,
    list_tree,
    permission_string,
    scan_directory,
    walk,
)

__all__ = [
    "KIND_DIRECTORY",
    "KIND_FILE",
    "TYPE_FILTER_DIR",
    "TYPE_FILTER_FILE",
    "Entry",
    "kind_matches_filter",
    "normalize_type_filter",
    "CONFIRM_PROMPT",
    "DEFAULT_LIMIT",
    "MODE_CONFIRM",
    "MODE_HALTED",
    "MODE_WALK_THROUGH",
    "SCOPE_CUMULATIVE",
    "SCOPE_PER_DIRECTORY",
    "TraversalContext",
    "DirectoryChild",
    "join_listing_path",
    "list_tree",
    "permission_string",
    "scan_directory",
    "walk",
]
