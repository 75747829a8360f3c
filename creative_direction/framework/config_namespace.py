"""Strict config section reader that rejects keys nobody asked for."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Iterable

_MISSING = object()


def _join(parent: str, key: str) -> str:
    return f"{parent}.{key}" if parent else key


@dataclass
class ConfigNamespace:
    data: Mapping[str, Any]
    path: str
    _consumed: set[str] = field(default_factory=set, init=False, repr=False)
    _children: dict[str, "ConfigNamespace"] = field(default_factory=dict, init=False, repr=False)
    _effective: dict[str, Any] = field(default_factory=dict, init=False, repr=False)

    def _key_path(self, key: str) -> str:
        return _join(self.path, key)

    def _get_raw(self, key: str, default: Any) -> Any:
        if not isinstance(key, str) or not key.strip():
            raise TypeError("ConfigNamespace key must be a non-empty string")
        key = key.strip()
        self._consumed.add(key)
        if key not in self.data or self.data.get(key) is None:
            if default is _MISSING:
                raise ValueError(f"Missing required config key: {self._key_path(key)}")
            return default
        return self.data[key]

    def namespace(self, key: str) -> "ConfigNamespace":
        """Return a child section; a missing or null section reads as empty."""

        key = key.strip()
        if key in self._children:
            return self._children[key]
        raw = self._get_raw(key, {})
        if not isinstance(raw, Mapping):
            raise TypeError(
                f"{self._key_path(key)} must be a mapping (type={type(raw).__name__})"
            )
        child = ConfigNamespace(dict(raw), path=self._key_path(key))
        self._children[key] = child
        return child

    def get_bool(self, key: str, *, default: bool | object = _MISSING) -> bool:
        value = self._get_raw(key, default)
        if not isinstance(value, bool):
            raise TypeError(
                f"{self._key_path(key)} must be a boolean (type={type(value).__name__})"
            )
        self._effective[key] = value
        return value

    def get_int(
        self,
        key: str,
        *,
        default: int | object = _MISSING,
        min_value: int | None = None,
        max_value: int | None = None,
    ) -> int:
        value = self._get_raw(key, default)
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{self._key_path(key)} must be an int (type={type(value).__name__})")
        if min_value is not None and value < min_value:
            raise ValueError(f"{self._key_path(key)} must be >= {min_value} (got {value})")
        if max_value is not None and value > max_value:
            raise ValueError(f"{self._key_path(key)} must be <= {max_value} (got {value})")
        self._effective[key] = value
        return value

    def get_str(
        self,
        key: str,
        *,
        default: str | None | object = _MISSING,
        choices: Iterable[str] | None = None,
    ) -> str | None:
        value = self._get_raw(key, default)
        if value is None:
            self._effective[key] = None
            return None
        if not isinstance(value, str):
            raise TypeError(f"{self._key_path(key)} must be a string (type={type(value).__name__})")
        value = value.strip()
        if not value:
            raise ValueError(f"{self._key_path(key)} cannot be empty")
        if choices is not None:
            allowed = tuple(choices)
            if value not in allowed:
                raise ValueError(
                    f"{self._key_path(key)} must be one of: {', '.join(allowed)} (got {value!r})"
                )
        self._effective[key] = value
        return value

    def get_list_str(
        self,
        key: str,
        *,
        default: Iterable[str] | object = _MISSING,
        allow_empty: bool = True,
    ) -> tuple[str, ...]:
        raw = self._get_raw(key, default)
        if isinstance(raw, str) or not isinstance(raw, (list, tuple)):
            raise TypeError(f"{self._key_path(key)} must be a list[str] (type={type(raw).__name__})")
        items: list[str] = []
        for idx, item in enumerate(raw):
            if not isinstance(item, str):
                raise TypeError(f"{self._key_path(key)}[{idx}] must be a string")
            text = item.strip()
            if not text:
                raise ValueError(f"{self._key_path(key)}[{idx}] cannot be empty")
            items.append(text)
        if not items and not allow_empty:
            raise ValueError(f"{self._key_path(key)} cannot be empty")
        self._effective[key] = list(items)
        return tuple(items)

    def unconsumed_keys(self) -> tuple[str, ...]:
        return tuple(sorted(str(k) for k in self.data.keys() if k not in self._consumed))

    def assert_consumed(self) -> None:
        unknown = self.unconsumed_keys()
        if unknown:
            consumed = ", ".join(sorted(self._consumed)) or "<none>"
            raise ValueError(
                f"Unknown config keys under {self.path or '<root>'}: {', '.join(unknown)} "
                f"(consumed: {consumed})"
            )
        for child in self._children.values():
            child.assert_consumed()

    def effective_values(self) -> dict[str, Any]:
        out = dict(self._effective)
        for key, child in self._children.items():
            out[key] = child.effective_values()
        return out
