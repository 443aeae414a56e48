from __future__ import annotations

from typing import Callable, Sequence


def hamming(a: int, b: int) -> int:
    """Number of differing bits between two non-negative integers.

    Negative values are rejected: Python ints have no fixed width, so the
    bit count of ``a ^ b`` is not a metric once signs are involved.
    """
    a, b = int(a), int(b)
    if a < 0 or b < 0:
        raise ValueError(f"hamming is defined on non-negative integers, got {a} and {b}")
    return bin(a ^ b).count("1")


def levenshtein(a: Sequence | str, b: Sequence | str) -> int:
    """Edit distance (insert/delete/substitute, unit cost).

    Works on strings and on any indexable sequence of comparable tokens.
    """
    if a == b:
        return 0
    # keep the shorter sequence as the row
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    row = list(range(len(b) + 1))
    for i, x in enumerate(a, start=1):
        diag, row[0] = row[0], i
        for j, y in enumerate(b, start=1):
            above = row[j]
            row[j] = min(above + 1, row[j - 1] + 1, diag + (x != y))
            diag = above
    return row[-1]


DISTANCES: dict[str, Callable] = {
    "hamming": hamming,
    "levenshtein": levenshtein,
}


def get_distance(name: str) -> Callable:
    try:
        return DISTANCES[name]
    except KeyError:
        raise ValueError(f"Unknown metric {name!r}, expected one of {sorted(DISTANCES)}") from None
