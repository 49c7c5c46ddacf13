"""Header normalization for exports that repeat column names."""

from __future__ import annotations

from typing import Iterable, List


def normalize_headers(raw: Iterable[str]) -> List[str]:
    """Return the header row with repeated names suffixed ``" (2)"``, ``" (3)"``, ...

    The first occurrence of a name is kept as-is. Later occurrences take the lowest
    suffix that is not already in use, so ``["A", "A (2)", "A"]`` becomes
    ``["A", "A (2)", "A (3)"]``. Column positions never change.
    """
    headers: List[str] = []
    seen: set[str] = set()
    for name in raw:
        candidate = name
        suffix = 2
        while candidate in seen:
            candidate = f"{name} ({suffix})"
            suffix += 1
        headers.append(candidate)
        seen.add(candidate)
    return headers
