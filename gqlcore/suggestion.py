"""Did-you-mean suggestions for misspelled names."""

from __future__ import annotations

import json
from typing import Iterable


def levenshtein_distance(s1: str, s2: str) -> int:
    """Return the edit distance between two strings."""
    column = list(range(len(s1) + 1))
    for x, rx in enumerate(s2):
        column[0] = x + 1
        lastdiag = x
        for y, ry in enumerate(s1):
            olddiag = column[y + 1]
            if rx != ry:
                lastdiag += 1
            column[y + 1] = min(column[y + 1] + 1, column[y] + 1, lastdiag)
            lastdiag = olddiag
    return column[len(s1)]


def make_suggestion(prefix: str, options: Iterable[str], input_: str) -> str:
    """Suggest the options close to ``input_``, or return "" if none are."""
    distances: dict[str, int] = {}
    selected: list[str] = []
    for option in options:
        distance = levenshtein_distance(input_, option)
        threshold = max(len(input_) // 2, len(option) // 2, 1)
        if distance < threshold:
            selected.append(option)
            distances[option] = distance

    if not selected:
        return ""
    selected.sort(key=lambda option: distances[option])

    parts = [json.dumps(option, ensure_ascii=False) for option in selected]
    if len(parts) > 1:
        parts[-1] = "or " + parts[-1]
    return f" {prefix} {', '.join(parts)}?"