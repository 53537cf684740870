from math import log2
from typing import Iterable, Sequence


def cumulative(probs: Iterable[float]) -> list[float]:
    # running sum; last value pinned to 1.0 to absorb float drift
    out = []
    s = 0.0
    for p in probs:
        s += p
        out.append(s)
    if out and s > 0.0:
        out[-1] = 1.0
    return out


def search_cumulative(cps: Sequence[float], r: float) -> int:
    """Index of the first cumulative value strictly above r, else the last index."""
    if not cps:
        raise IndexError("empty cumulative distribution")
    for i, cp in enumerate(cps):
        if cp > r:
            return i
    return len(cps) - 1


def entropy(probs: Iterable[float]) -> float:
    H = 0.0
    for p in probs:
        if p <= 0.0:
            continue
        H -= p * log2(p)
    return H
