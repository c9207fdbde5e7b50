"""Placeholder tokens and the counter that mints them."""

from __future__ import annotations

import itertools
import re
import threading
from typing import Any

PLACEHOLDER_PREFIX = "$fig-"
PLACEHOLDER_RE = re.compile(r"\$fig-\d+")

# Placeholder token -> original interpolated value
Refs = dict[str, Any]


class RefCounter:
    """Monotonic source of placeholder tokens.

    Every token handed out is unique for the lifetime of the counter; there is
    no reset. Minting is guarded by a lock so threads sharing one counter never
    receive the same token.
    """

    def __init__(self, start: int = 0) -> None:
        self._count = itertools.count(start)
        self._lock = threading.Lock()

    def next_placeholder(self) -> str:
        with self._lock:
            n = next(self._count)
        return f"{PLACEHOLDER_PREFIX}{n}"


def is_placeholder(text: str) -> bool:
    """Return True if text is exactly one placeholder token."""
    return PLACEHOLDER_RE.fullmatch(text) is not None
