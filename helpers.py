from __future__ import annotations
import difflib
from typing import Iterable, Optional

def levenshtein_distance(a: str, b: str) -> int:
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        current = [i]
        for j, cb in enumerate(b, 1):
            current.append(min(previous[j] + 1,
                               current[j - 1] + 1,
                               previous[j - 1] + (ca != cb)))
        previous = current
    return previous[-1]

def first_within_distance(word: str, candidates: Iterable[str], max_distance: int) -> Optional[str]:
    for candidate in candidates:
        if levenshtein_distance(word, candidate) <= max_distance:
            return candidate
    return None

def suggest(word: str, candidates: Iterable[str]) -> Optional[str]:
    matches = difflib.get_close_matches(word, list(candidates), n=1, cutoff=0.6)
    return matches[0] if matches else None
