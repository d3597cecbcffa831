"""Claim bookkeeping for the priority lexer.

Tracks which offsets of the source are already owned by an accepted
token. Stored as sorted, disjoint half-open intervals so both the
overlap check and the claim are O(log n) lookups instead of a walk
over every character of the match.

Thread Safety:
ClaimSet instances are single-use, created per tokenize call.
"""

from __future__ import annotations

from bisect import bisect_right


class ClaimSet:
    """Set of claimed source offsets, stored as disjoint intervals.

    Invariant: every offset is claimed at most once. ``claim`` refuses
    any span that touches an already claimed offset, so accepted spans
    never overlap.

    Usage:
        >>> claims = ClaimSet()
        >>> claims.claim(0, 2)
        True
        >>> claims.overlaps(1, 4)
        True
        >>> claims.claim(1, 4)
        False
    """

    __slots__ = ("_starts", "_ends")

    def __init__(self) -> None:
        self._starts: list[int] = []
        self._ends: list[int] = []

    def overlaps(self, start: int, end: int) -> bool:
        """Check whether any offset in ``[start, end)`` is claimed.

        Empty spans never overlap.
        """
        if start >= end:
            return False
        # Rightmost interval starting at or before `start`
        idx = bisect_right(self._starts, start) - 1
        if idx >= 0 and self._ends[idx] > start:
            return True
        # Next interval must begin at or after `end`
        nxt = idx + 1
        return nxt < len(self._starts) and self._starts[nxt] < end

    def claim(self, start: int, end: int) -> bool:
        """Claim ``[start, end)`` if none of it is claimed yet.

        Returns:
            True if the span was claimed, False if it was rejected
            (empty, or touching an existing claim).
        """
        if start >= end or self.overlaps(start, end):
            return False
        idx = bisect_right(self._starts, start)
        self._starts.insert(idx, start)
        self._ends.insert(idx, end)
        return True

    def is_claimed(self, offset: int) -> bool:
        """Check a single offset."""
        return self.overlaps(offset, offset + 1)

    def spans(self) -> list[tuple[int, int]]:
        """Claimed spans in ascending order."""
        return list(zip(self._starts, self._ends, strict=True))

    def __len__(self) -> int:
        """Number of claimed offsets."""
        return sum(end - start for start, end in zip(self._starts, self._ends, strict=True))

    def __bool__(self) -> bool:
        return bool(self._starts)
