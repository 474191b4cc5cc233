"""desk_host/core/state.py
Thread-safe shared state for the supervisor, worker and UI threads.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, Iterator, List

CLOSE_WINDOW = "CloseWindow"


class SharedState:
    """Synchronized key/value store shared by reference between:
    - Supervisor (main thread, polling)
    - Worker context
    - UI context (Tkinter)

    `CloseWindow` starts as False and latches once set to True.
    """

    def __init__(self, **initial: Any) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._data: Dict[str, Any] = {CLOSE_WINDOW: False}
        for key, value in initial.items():
            self.set(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        with self._cond:
            return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        with self._cond:
            if key == CLOSE_WINDOW:
                # latch: never reverts to False
                if self._data.get(CLOSE_WINDOW):
                    return
                value = bool(value)
            self._data[key] = value
            self._cond.notify_all()

    def __getitem__(self, key: str) -> Any:
        with self._cond:
            return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: object) -> bool:
        with self._cond:
            return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def keys(self) -> List[str]:
        with self._cond:
            return list(self._data)

    def snapshot(self) -> Dict[str, Any]:
        with self._cond:
            return dict(self._data)

    # ---------------- Shutdown flag ----------------
    @property
    def close_requested(self) -> bool:
        return bool(self.get(CLOSE_WINDOW, False))

    def request_close(self) -> None:
        self.set(CLOSE_WINDOW, True)

    def wait_for_close(self, timeout: float) -> bool:
        """Block up to `timeout` seconds; return early once the flag is set."""
        with self._cond:
            return self._cond.wait_for(lambda: bool(self._data.get(CLOSE_WINDOW)), timeout=timeout)
