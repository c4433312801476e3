from __future__ import annotations

"""
rewriter – Build the rewritten argv and the inheritable-options string.

Instead of shifting a live buffer, a pass feeds every token to an
`ArgvRewriter`: tokens that survive are kept in order, tokens consumed by an
option are dropped and, for inheritable options, recorded verbatim in the
`InheritanceAccumulator`.
"""

from typing import Iterable, List, Optional, Sequence


class InheritanceAccumulator:
    """Space-joined record of consumed inheritable option tokens."""

    def __init__(self, tokens: Optional[Iterable[str]] = None) -> None:
        self._tokens: List[str] = list(tokens or ())

    def extend(self, tokens: Sequence[str]) -> None:
        self._tokens.extend(tokens)

    def __bool__(self) -> bool:
        return bool(self._tokens)

    def __str__(self) -> str:
        return " ".join(self._tokens)

    def __repr__(self) -> str:
        return f"InheritanceAccumulator({self._tokens!r})"


class ArgvRewriter:
    """Collect surviving tokens and route consumed ones to the accumulator."""

    def __init__(self, accumulator: Optional[InheritanceAccumulator] = None) -> None:
        self.accumulator = accumulator if accumulator is not None else InheritanceAccumulator()
        self._kept: List[str] = []
        self._inherited: List[str] = []

    def keep(self, *tokens: str) -> None:
        self._kept.extend(tokens)

    def consume(self, tokens: Sequence[str], *, inherit: bool) -> None:
        """Drop *tokens* from the output, recording them when *inherit* is set."""
        if inherit:
            self._inherited.extend(tokens)
            self.accumulator.extend(tokens)

    @property
    def kept(self) -> List[str]:
        return list(self._kept)

    @property
    def inherited(self) -> List[str]:
        return list(self._inherited)
