"""Subsequence fuzzy scoring for directory entry names."""

from __future__ import annotations

from collections.abc import Iterable

WORD_BOUNDARY_CHARS = "/_- ."


def fuzzy_score(query: str, candidate: str) -> int | None:
    """Score ``candidate`` against ``query`` or return ``None`` for no match.

    Every query character must appear in order, compared case-insensitively.
    Contiguous runs and word-boundary hits score higher; gaps and long names
    score lower.
    """
    if not query:
        return 0
    query_folded = query.casefold()
    candidate_folded = candidate.casefold()

    score = 0
    prev_idx = -1
    run = 0
    for needle in query_folded:
        idx = candidate_folded.find(needle, prev_idx + 1)
        if idx < 0:
            return None
        if idx == prev_idx + 1:
            run += 1
            score += 20 + min(16, run * 4)
        else:
            gap = idx - prev_idx - 1
            run = 0
            score -= min(40, gap * 2)
        if idx == 0 or candidate_folded[idx - 1] in WORD_BOUNDARY_CHARS:
            score += 35
        prev_idx = idx

    score -= len(candidate_folded) // 5
    return score


def fuzzy_filter(query: str, names: Iterable[str]) -> list[str]:
    """Return matching ``names`` best-first.

    Ties break on shorter name, then on the name itself.
    """
    scored: list[tuple[int, int, str]] = []
    for name in names:
        score = fuzzy_score(query, name)
        if score is None:
            continue
        scored.append((score, len(name), name))
    scored.sort(key=lambda item: (-item[0], item[1], item[2]))
    return [name for _, _, name in scored]
