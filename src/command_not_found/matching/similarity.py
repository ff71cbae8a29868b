"""Normalized edit-distance scoring between command names."""

from __future__ import annotations

from typing import Sequence


def edit_distance(first: Sequence, second: Sequence) -> int:
    """Calculate the Levenshtein distance between two names.

    ``table[i][j]`` holds the distance between the first ``i`` elements of
    ``first`` and the first ``j`` elements of ``second``. Both ``str`` and
    ``bytes`` are accepted; bytes compare byte by byte.

    Args:
        first: The first name
        second: The second name

    Returns:
        Minimum number of substitutions, deletions and insertions
    """
    len1, len2 = len(first), len(second)
    table = [[0] * (len2 + 1) for _ in range(len1 + 1)]

    for i in range(len1 + 1):
        table[i][0] = i
    for j in range(len2 + 1):
        table[0][j] = j

    for i in range(1, len1 + 1):
        for j in range(1, len2 + 1):
            if first[i - 1] == second[j - 1]:
                table[i][j] = table[i - 1][j - 1]
            else:
                table[i][j] = 1 + min(
                    table[i - 1][j - 1],  # substitution
                    table[i - 1][j],  # deletion
                    table[i][j - 1],  # insertion
                )

    return table[len1][len2]


def similarity(first: Sequence, second: Sequence) -> float:
    """Score how close ``first`` is to ``second``.

    The distance is normalized by the length of ``first`` only, so the score
    is asymmetric and drops below zero when ``second`` is much longer.

    Args:
        first: The candidate name
        second: The name it is compared against

    Returns:
        ``(len(first) - distance) / len(first)``, or 0.0 for an empty ``first``
    """
    if not first:
        return 0.0
    return (len(first) - edit_distance(first, second)) / len(first)
