"""Answer store: ordered, set-once mapping from question name to value."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Union

Answer = Union[str, int, bool]


class Answers(Mapping[str, Any]):
    """Answers collected so far, in the order questions were answered.

    The store only grows: a key may be committed once and is read-only
    afterwards.
    """

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = {}
        for name, value in (initial or {}).items():
            self.commit(name, value)

    def commit(self, name: str, value: Any) -> None:
        """Store *value* under *name*.

        Raises:
            KeyError: If *name* has already been answered.
        """
        if name in self._values:
            raise KeyError(f"Question {name!r} has already been answered")
        self._values[name] = value

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Answers({self._values!r})"
