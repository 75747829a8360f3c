"""Bounded recent-selection history threaded through prompt generation."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace
from typing import Callable, TypeVar

from creative_direction.framework.config import (
    ANTI_REPETITION_DIMENSIONS,
    DEFAULT_FASHION_WINDOW,
)

T = TypeVar("T")


@dataclass(frozen=True)
class AntiRepetitionMemory:
    """Immutable FIFO of recently chosen categories, oldest first."""

    recent: tuple[str, ...] = ()
    limit: int = DEFAULT_FASHION_WINDOW

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError(f"AntiRepetitionMemory.limit must be >= 1 (got {self.limit})")
        if len(self.recent) > self.limit:
            object.__setattr__(self, "recent", tuple(self.recent[-self.limit :]))

    def remember(self, category: str) -> "AntiRepetitionMemory":
        return replace(self, recent=(*self.recent, category)[-self.limit :])

    def excludes(self, category: str) -> bool:
        return category in self.recent

    def with_limit(self, limit: int) -> "AntiRepetitionMemory":
        return AntiRepetitionMemory(recent=self.recent, limit=limit)

    def __len__(self) -> int:
        return len(self.recent)


@dataclass(frozen=True)
class SelectionHistory:
    fashion: AntiRepetitionMemory = field(default_factory=AntiRepetitionMemory)
    pose: AntiRepetitionMemory = field(default_factory=AntiRepetitionMemory)

    def memory_for(self, dimension: str) -> AntiRepetitionMemory:
        if dimension not in ANTI_REPETITION_DIMENSIONS:
            raise ValueError(f"Unknown anti-repetition dimension: {dimension!r}")
        return getattr(self, dimension)

    def updated(self, dimension: str, memory: AntiRepetitionMemory) -> "SelectionHistory":
        if dimension not in ANTI_REPETITION_DIMENSIONS:
            raise ValueError(f"Unknown anti-repetition dimension: {dimension!r}")
        return replace(self, **{dimension: memory})

    def to_dict(self) -> dict[str, list[str]]:
        return {name: list(self.memory_for(name).recent) for name in ANTI_REPETITION_DIMENSIONS}


class HistoryStore:
    """Process-local histories keyed by session or user id.

    The engine never reads this; callers fetch a history, pass it into
    `generate_prompt`, and save the returned one back.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._histories: dict[str, SelectionHistory] = {}

    def get(self, key: str) -> SelectionHistory:
        with self._lock:
            return self._histories.get(key, SelectionHistory())

    def put(self, key: str, history: SelectionHistory) -> None:
        with self._lock:
            self._histories[key] = history

    def update(
        self,
        key: str,
        fn: Callable[[SelectionHistory], tuple[T, SelectionHistory]],
    ) -> T:
        """Run `fn` on the saved history and store the history it returns.

        The read, `fn` and the write happen under one lock, so concurrent
        updates to a key are applied one after another. `fn` must not call
        back into the store.
        """

        with self._lock:
            value, history = fn(self._histories.get(key, SelectionHistory()))
            self._histories[key] = history
            return value

    def clear(self, key: str | None = None) -> None:
        with self._lock:
            if key is None:
                self._histories.clear()
            else:
                self._histories.pop(key, None)

    def keys(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(sorted(self._histories))
