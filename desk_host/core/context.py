"""desk_host/core/context.py
Execution contexts: one dedicated thread running a single body, with its own
variable namespace and five diagnostic streams.

Usage:
    ctx = ExecutionContext("Worker")
    broadcast(ctx, namespace)
    handle = ctx.start(run_worker)
    ...
    ctx.dispose()
"""

from __future__ import annotations

import enum
import threading
import traceback
from typing import Any, Callable, Dict, Iterator, List, Optional

from desk_host import config

from .broadcast import SHARED_VARIABLES, preference_name
from .errors import BroadcastError, ContextStateError
from .prefs import STREAM_KINDS

APARTMENTS = ("STA", "MTA")


class TaskStatus(enum.Enum):
    NOT_STARTED = "NotStarted"
    RUNNING = "Running"
    COMPLETED = "Completed"
    FAILED = "Failed"


class TaskHandle:
    """Completion handle for a context body."""

    def __init__(self) -> None:
        self._done = threading.Event()
        self.status = TaskStatus.NOT_STARTED
        self.exception: Optional[BaseException] = None

    def done(self) -> bool:
        return self._done.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self._done.wait(timeout)

    def _finish(self, exc: Optional[BaseException]) -> None:
        self.exception = exc
        self.status = TaskStatus.FAILED if exc is not None else TaskStatus.COMPLETED
        self._done.set()


class StreamView:
    """Live handle on one stream; every operation goes through the owner's lock."""

    def __init__(self, streams: "DiagnosticStreams", kind: str) -> None:
        self._streams = streams
        self.kind = kind

    def append(self, message: str) -> None:
        self._streams.append(self.kind, message)

    def clear(self) -> None:
        self._streams.clear(self.kind)

    def read(self) -> List[str]:
        return self._streams.read(self.kind)

    def __len__(self) -> int:
        return len(self.read())

    def __iter__(self) -> Iterator[str]:
        return iter(self.read())

    def __getitem__(self, index):
        return self.read()[index]

    def __bool__(self) -> bool:
        return len(self) > 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StreamView):
            other = other.read()
        return self.read() == other

    __hash__ = None  # type: ignore[assignment]


class DiagnosticStreams:
    """Five append-only message sequences, each clearable by the reader."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[str, List[str]] = {kind: [] for kind in STREAM_KINDS}

    def append(self, kind: str, message: str) -> None:
        with self._lock:
            self._entries[kind].append(message)

    def read(self, kind: str) -> List[str]:
        with self._lock:
            return list(self._entries[kind])

    def clear(self, kind: str) -> None:
        with self._lock:
            self._entries[kind].clear()

    def drain(self, kind: str) -> List[str]:
        """Return and clear everything currently in `kind`."""
        with self._lock:
            entries = self._entries[kind]
            self._entries[kind] = []
        return entries

    def discard(self, kind: str, count: int) -> None:
        """Remove the oldest `count` entries of `kind` once they have been emitted."""
        with self._lock:
            del self._entries[kind][:count]

    def pending(self) -> List[str]:
        with self._lock:
            return [kind for kind in STREAM_KINDS if self._entries[kind]]

    def __getitem__(self, kind: str) -> StreamView:
        if kind not in self._entries:
            raise KeyError(kind)
        return StreamView(self, kind)


class ExecutionContext:
    def __init__(self, name: str, apartment: str = config.APARTMENT) -> None:
        if apartment not in APARTMENTS:
            raise ValueError(f"unknown apartment mode: {apartment!r}")
        self.name = name
        self.apartment = apartment
        self.variables: Dict[str, Any] = {}
        self.streams = DiagnosticStreams()
        self.stop_event = threading.Event()
        self.handle = TaskHandle()
        self._thread: Optional[threading.Thread] = None
        self._started = False
        self._disposed = False

    @property
    def started(self) -> bool:
        return self._started

    @property
    def disposed(self) -> bool:
        return self._disposed

    # ---------------- Namespace ----------------
    def lookup(self, name: str) -> Any:
        return self.variables[name]

    def import_functions(self) -> None:
        self.lookup("shared_functions").import_into(self.variables)

    # ---------------- Diagnostic writers ----------------
    def _write(self, kind: str, message: str) -> None:
        if self.variables.get(preference_name(kind), False):
            self.streams.append(kind, message)

    def write_information(self, message: str) -> None:
        self._write("information", message)

    def write_verbose(self, message: str) -> None:
        self._write("verbose", message)

    def write_warning(self, message: str) -> None:
        self._write("warning", message)

    def write_error(self, message: str) -> None:
        self._write("error", message)

    def write_debug(self, message: str) -> None:
        self._write("debug", message)

    # ---------------- Lifecycle ----------------
    def start(self, body: Callable[["ExecutionContext"], Any]) -> TaskHandle:
        """Run `body(self)` on a dedicated thread. Returns without blocking."""
        if self._started:
            raise ContextStateError(f"context {self.name!r} already started")
        missing = [name for name in SHARED_VARIABLES if name not in self.variables]
        if missing:
            raise BroadcastError(f"context {self.name!r} is missing shared variable(s) {', '.join(missing)}")

        self._started = True
        self.handle.status = TaskStatus.RUNNING
        self._thread = threading.Thread(
            target=self._run,
            args=(body,),
            name=f"desk-host-{self.name}",
            daemon=True,
        )
        self._thread.start()
        return self.handle

    def _run(self, body: Callable[["ExecutionContext"], Any]) -> None:
        try:
            body(self)
        except Exception as e:
            # Faults stay inside the context and surface on its error stream.
            detail = traceback.format_exc().rstrip()
            self.streams.append("error", f"{type(e).__name__}: {e}\n{detail}")
            self.handle._finish(e)
        else:
            self.handle._finish(None)

    def dispose(self) -> None:
        """Ask the body to stop, wait for it to return, release the thread."""
        if self._disposed:
            raise ContextStateError(f"context {self.name!r} already disposed")
        self._disposed = True
        self.stop_event.set()
        if self._thread is not None:
            # No timeout: a body that never returns hangs shutdown.
            self._thread.join()
            self._thread = None
