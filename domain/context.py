# domain/context.py
from __future__ import annotations

from typing import Any, Dict, Iterator, Optional

NULL_OBJECT = "NullObject"


class Context:
    """
    Mutable key/value bag shared by every command of one chain or process run.

    Lookups never raise: `get` returns the default (None) and `get_as_string`
    returns the "NullObject" placeholder for missing keys.
    """

    def __init__(self, values: Optional[Dict[str, Any]] = None) -> None:
        self._values: Dict[str, Any] = dict(values or {})

    @classmethod
    def standard(cls, key: Optional[str] = None, value: Any = None) -> "Context":
        ctx = cls()
        if key is not None:
            ctx.put(key, value)
        return ctx

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def get_as_string(self, key: str) -> str:
        value = self._values.get(key)
        if value is None:
            return NULL_OBJECT
        return str(value)

    def put(self, key: str, value: Any) -> None:
        self._values[key] = value

    def snapshot(self) -> Dict[str, Any]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Context({self._values!r})"


class NullContext(Context):
    """Read-only empty context. Writes are dropped so the shared instance stays empty."""

    def __init__(self) -> None:
        super().__init__()

    def put(self, key: str, value: Any) -> None:
        pass

    def __repr__(self) -> str:
        return "NullContext()"


# shared context for running commands without one
NULL_CONTEXT = NullContext()
