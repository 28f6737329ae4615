"""Word-pool providers: level number in, candidate vocabulary out."""
from __future__ import annotations

from typing import Iterable, Mapping, Protocol, Sequence

from wordfall import is_letter


class WordPoolProvider(Protocol):
    def __call__(self, level: int) -> Sequence[str]: ...


class StaticWordPool:
    """In-memory provider backed by a ``{level: words}`` mapping."""

    def __init__(self, pools: Mapping[int, Sequence[str]]) -> None:
        self._pools = {level: tuple(words) for level, words in pools.items()}

    @property
    def levels(self) -> list[int]:
        return sorted(self._pools)

    def __call__(self, level: int) -> Sequence[str]:
        return self._pools.get(level, ())


def playable_words(words: Iterable[str]) -> list[str]:
    """Drop one-letter entries and anything that is not plain lowercase a-z."""
    return [w for w in words if len(w) > 1 and all(is_letter(c) for c in w)]
