"""nanolight TokenizeAccumulator - opt-in profiling for tokenization.

This module provides accumulated metrics during tokenization:
- Total elapsed time
- Source length
- Token count

Zero overhead when disabled (get_tokenize_accumulator() returns None).

Example:
    from nanolight import highlight
    from nanolight.profiling import profiled_tokenize

    # Normal highlight (no overhead)
    html = highlight("const x = 1;")

    # Profiled highlight (opt-in)
    with profiled_tokenize() as metrics:
        html = highlight("const x = 1;")

    print(metrics.summary())
    # {"total_ms": 0.2, "source_length": 12, "token_count": 4, "tokenize_calls": 1}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class TokenizeAccumulator:
    """Accumulated metrics during tokenization.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of sources tokenized.
        token_count: Total number of tokens produced.
        tokenize_calls: Number of tokenize calls recorded.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    token_count: int = 0
    tokenize_calls: int = 0

    def record_tokenize(self, source_length: int, token_count: int) -> None:
        """Record a tokenize call."""
        self.tokenize_calls += 1
        self.source_length += source_length
        self.token_count += token_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of tokenize metrics.

        Returns:
            Dict with total_ms, source_length, token_count, tokenize_calls.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "token_count": self.token_count,
            "tokenize_calls": self.tokenize_calls,
        }


# Module-level ContextVar
_accumulator: ContextVar[TokenizeAccumulator | None] = ContextVar(
    "tokenize_accumulator",
    default=None,
)


def get_tokenize_accumulator() -> TokenizeAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_tokenize() -> Iterator[TokenizeAccumulator]:
    """Context manager for profiled tokenization.

    Creates a TokenizeAccumulator and makes it available via
    get_tokenize_accumulator() for the duration of the with block.

    Yields:
        TokenizeAccumulator populated by tokenize calls in this context.

    """
    acc = TokenizeAccumulator()
    token: Token[TokenizeAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
