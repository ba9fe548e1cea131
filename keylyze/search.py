"""Fuzzy layout-name search."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import PurePath

MIN_SIMILARITY = 0.55


def jaro(a: str, b: str) -> float:
    """Return the Jaro similarity of two strings, between 0.0 and 1.0."""
    a_len, b_len = len(a), len(b)
    if a_len == 0 and b_len == 0:
        return 1.0
    if a_len == 0 or b_len == 0:
        return 0.0

    search_range = max(max(a_len, b_len) // 2 - 1, 0)
    a_flags = [False] * a_len
    b_flags = [False] * b_len
    matches = 0

    for i, a_char in enumerate(a):
        low = max(i - search_range, 0)
        high = min(b_len, i + search_range + 1)
        for j in range(low, high):
            if not b_flags[j] and b[j] == a_char:
                a_flags[i] = True
                b_flags[j] = True
                matches += 1
                break

    if matches == 0:
        return 0.0

    a_matched = (c for c, flag in zip(a, a_flags) if flag)
    b_matched = (c for c, flag in zip(b, b_flags) if flag)
    transpositions = sum(x != y for x, y in zip(a_matched, b_matched)) // 2

    return (
        matches / a_len + matches / b_len + (matches - transpositions) / matches
    ) / 3.0


def jaro_winkler(a: str, b: str) -> float:
    """Return the Jaro-Winkler similarity, favouring a shared prefix."""
    similarity = jaro(a, b)
    if similarity <= 0.7:
        return similarity
    prefix = 0
    for x, y in zip(a[:4], b):
        if x != y:
            break
        prefix += 1
    return similarity + 0.1 * prefix * (1.0 - similarity)


def search(
    possible_results: Iterable[str], query: str, max_results: int
) -> list[str]:
    """Return up to ``max_results`` names most similar to ``query``, best first."""
    query = query.lower()
    scored = [
        (jaro_winkler(name.lower(), query), name) for name in possible_results
    ]
    matching = [pair for pair in scored if pair[0] >= MIN_SIMILARITY]
    matching.sort(key=lambda pair: pair[0], reverse=True)
    return [name for _, name in matching[:max_results]]


def layout_names(paths: Sequence[str]) -> list[str]:
    """Return the file stems of ``paths``, sorted case-insensitively."""
    names = []
    for path in paths:
        pure = PurePath(path)
        if pure.name in ("", ".", ".."):
            continue
        names.append(pure.stem)
    return sorted(names, key=str.lower)