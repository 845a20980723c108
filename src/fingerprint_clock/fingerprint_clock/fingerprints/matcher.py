from __future__ import annotations

from ..core.constants import BYTE_TOLERANCE, MATCH_THRESHOLD
from .model import MatchResult, Template


class TemplateMatcher:
    """Byte-similarity matcher.

    Two templates match when more than `threshold` percent of the positions
    in their common prefix differ by at most `tolerance`. Identical payloads
    always score 100.
    """

    def __init__(self, *, threshold: float = MATCH_THRESHOLD, tolerance: int = BYTE_TOLERANCE):
        self._threshold = float(threshold)
        self._tolerance = int(tolerance)

    @property
    def threshold(self) -> float:
        return self._threshold

    def compare(self, a: Template, b: Template) -> MatchResult:
        if a.raw == b.raw:
            return MatchResult(matched=True, score=100.0)

        n = min(len(a.raw), len(b.raw))
        if n == 0:
            return MatchResult(matched=False, score=0.0)

        tol = self._tolerance
        # bytes index as ints 0-255
        agreements = sum(1 for x, y in zip(a.raw[:n], b.raw[:n]) if abs(x - y) <= tol)
        score = 100.0 * agreements / n
        return MatchResult(matched=score > self._threshold, score=score)
