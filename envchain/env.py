"""
Env: a lock-guarded collection of environment variables loaded from files.
Keys and values are plain strings; callers convert values as needed.
"""
from __future__ import annotations

import threading
from typing import Iterable, Mapping


class Env:
    """
    Mapping of environment variable names to values.

    Every operation holds the instance lock for its whole duration, so one Env
    can be shared between threads once it has been loaded.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._lock = threading.Lock()
        self._vars: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str:
        """
        Return the value for key, or an empty string when it is not set.
        """
        with self._lock:
            return self._vars.get(key, "")

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._vars[key] = value

    def count(self) -> int:
        with self._lock:
            return len(self._vars)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._vars)

    def values(self) -> list[str]:
        with self._lock:
            return list(self._vars.values())

    def items(self) -> list[tuple[str, str]]:
        with self._lock:
            return list(self._vars.items())

    def to_dict(self) -> dict[str, str]:
        with self._lock:
            return dict(self._vars)

    def merge(self, other: "Env", overwrite: bool) -> "Env":
        """
        Return a new Env holding this env's variables plus those of other.

        Keys missing here are always taken from other. Keys present in both
        keep this env's value unless overwrite is set. Neither input changes.
        """
        # Snapshot first: other may be self and the lock is not reentrant.
        incoming = other.items()
        with self._lock:
            merged = dict(self._vars)
            for key, value in incoming:
                if key in self._vars and not overwrite:
                    continue
                merged[key] = value
        return Env(merged)

    def check_required(self, keys: Iterable[str]) -> list[str]:
        """
        Return the keys from the given list that are unset or empty, in order.
        """
        with self._lock:
            return [key for key in keys if not self._vars.get(key)]

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._vars

    def __repr__(self) -> str:
        # Values are left out; they are often secrets.
        return f"Env(keys={self.keys()!r})"
