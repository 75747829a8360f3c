from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Generic, TypeVar

B = TypeVar("B")

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_key(name: str) -> str:
    """'Moody Night Energy' -> 'moody-night-energy'."""
    return _WHITESPACE_RE.sub("-", (name or "").strip().lower())


def display_name(key: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in key.split("-"))


class Catalog(Generic[B]):
    """Read-only, declaration-ordered collection of blocks for one dimension."""

    def __init__(self, dimension: str, blocks: Mapping[str, B], *, default_key: str) -> None:
        if default_key not in blocks:
            raise ValueError(f"{dimension} catalog default {default_key!r} is not a catalog key")
        self.dimension = dimension
        self.default_key = default_key
        self._blocks: Mapping[str, B] = MappingProxyType(dict(blocks))

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[str]:
        return iter(self._blocks)

    def __contains__(self, key: object) -> bool:
        return key in self._blocks

    def __getitem__(self, key: str) -> B:
        return self._blocks[key]

    def keys(self) -> tuple[str, ...]:
        return tuple(self._blocks)

    def items(self) -> tuple[tuple[str, B], ...]:
        return tuple(self._blocks.items())

    @property
    def default_block(self) -> B:
        return self._blocks[self.default_key]

    def resolve_key(self, name: str | None) -> str:
        """Map a key or display name onto a catalog key, else the dimension default."""
        key = normalize_key(name or "")
        return key if key in self._blocks else self.default_key

    def get(self, name: str | None) -> B:
        return self._blocks[self.resolve_key(name)]

    def available_names(self) -> list[str]:
        return [display_name(key) for key in self._blocks]

    def keywords_for(self, name: str | None) -> tuple[str, ...]:
        return tuple(getattr(self.get(name), "keywords", ()))
