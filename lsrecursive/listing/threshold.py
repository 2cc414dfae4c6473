"""Shared traversal state and the "too many files" confirmation policy.

One ``TraversalContext`` is created per run and handed to every recursive
walker call, so the running total and mode accumulate across the whole tree.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TextIO

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 100

MODE_CONFIRM = "confirm"
MODE_WALK_THROUGH = "walk-through"
MODE_HALTED = "halted"

SCOPE_CUMULATIVE = "cumulative"
SCOPE_PER_DIRECTORY = "per-directory"

CONFIRM_PROMPT = "Listed files are too long. Do you want to read all files? [Yn]: "
DECLINE_ANSWER = "n"


def read_answer_line() -> str:
    """Read one answer line from stdin, treating EOF as an empty answer."""
    try:
        return input()
    except EOFError:
        return ""


class TraversalContext:
    """Running entry total plus policy mode for one listing run.

    Modes move ``confirm`` -> ``walk-through`` once the operator accepts (or
    immediately when ``assume_yes``), or ``confirm`` -> ``halted`` when the
    operator answers ``n``. Neither later mode ever prompts again.
    """

    def __init__(
        self,
        limit: int = DEFAULT_LIMIT,
        scope: str = SCOPE_CUMULATIVE,
        assume_yes: bool = False,
        prompt: Callable[[], str] | None = None,
        stream: TextIO | None = None,
    ) -> None:
        if scope not in (SCOPE_CUMULATIVE, SCOPE_PER_DIRECTORY):
            raise ValueError(f"unknown threshold scope: {scope!r}")
        self.limit = limit
        self.scope = scope
        self.total = 0
        self.mode = MODE_WALK_THROUGH if assume_yes else MODE_CONFIRM
        self._prompt = prompt if prompt is not None else read_answer_line
        self._stream = stream

    @property
    def halted(self) -> bool:
        return self.mode == MODE_HALTED

    def _write(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(text)
        stream.flush()

    def _over_limit(self, child_count: int) -> bool:
        if self.scope == SCOPE_PER_DIRECTORY:
            return child_count > self.limit
        return self.total > self.limit

    def admit(self, child_count: int) -> bool:
        """Account for one scanned directory and decide whether to list it.

        Returns ``False`` when the run is halted, either already or because
        the operator declined right now.
        """
        self.total += child_count
        if self.mode == MODE_HALTED:
            return False
        if not self._over_limit(child_count):
            return True

        if self.mode == MODE_CONFIRM:
            self._write(CONFIRM_PROMPT)
            answer = self._prompt()
            if answer.strip().lower() == DECLINE_ANSWER:
                self.mode = MODE_HALTED
                logger.debug("Listing halted by operator at %d entries", self.total)
                self._write(f"Stopped to list. Show {self.total} files.\n")
                return False

        if self.mode != MODE_WALK_THROUGH:
            logger.debug("Threshold %d passed, continuing without prompts", self.limit)
        self.mode = MODE_WALK_THROUGH
        return True


__all__ = [
    "DEFAULT_LIMIT",
    "MODE_CONFIRM",
    "MODE_WALK_THROUGH",
    "MODE_HALTED",
    "SCOPE_CUMULATIVE",
    "SCOPE_PER_DIRECTORY",
    "CONFIRM_PROMPT",
    "TraversalContext",
    "read_answer_line",
]
