"""Public package surface for ls-recursive.

Exports ``main`` for programmatic CLI invocation.
The walker and exclusion rules live in ``lsrecursive.listing`` and
``lsrecursive.exclusions``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
