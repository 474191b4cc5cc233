"""desk_host/core/functions.py
Helper functions shared by every execution context.

Register helpers on `shared_functions`; each context imports the bundle into
its own namespace before its body runs.
"""

from __future__ import annotations

from typing import Callable, Dict, List, MutableMapping


class FunctionBundle:
    def __init__(self) -> None:
        self._functions: Dict[str, Callable] = {}

    def register(self, fn: Callable) -> Callable:
        """Add `fn` to the bundle. Usable as a decorator."""
        self._functions[fn.__name__] = fn
        return fn

    def names(self) -> List[str]:
        return list(self._functions)

    def copy(self) -> "FunctionBundle":
        clone = FunctionBundle()
        clone._functions = dict(self._functions)
        return clone

    def import_into(self, namespace: MutableMapping[str, object]) -> None:
        namespace.update(self._functions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FunctionBundle):
            return NotImplemented
        return self._functions == other._functions

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self._functions)

    def __contains__(self, name: object) -> bool:
        return name in self._functions


# Empty for now; cross-context helpers go here.
shared_functions = FunctionBundle()
