"""desk_host/supervisor.py
Main-thread supervisor.

Bootstrapping -> Polling -> ShuttingDown -> Terminated

- Seeds shared variables into the Worker and UI contexts, then starts both.
- Drains every diagnostic stream to the terminal on each sweep.
- Stops polling once the UI sets `CloseWindow`, disposes Worker then UI.
- Kills the process at the end unless --debug or --verbose was given.
"""

from __future__ import annotations

import enum
import gc
import os
import sys
from typing import Any, Callable, List, Optional

from desk_host import config
from desk_host.core import (
    STREAM_KINDS,
    ContextStateError,
    DisplayPreferences,
    ExecutionContext,
    FunctionBundle,
    SharedState,
    broadcast,
    process_namespace,
    shared_functions,
)

Body = Callable[[ExecutionContext], Any]


class SupervisorState(enum.Enum):
    BOOTSTRAPPING = "Bootstrapping"
    POLLING = "Polling"
    SHUTTING_DOWN = "ShuttingDown"
    TERMINATED = "Terminated"


def format_entries(context_name: str, kind: str, entries: List[str]) -> List[str]:
    """Tag each entry; frame batches of more than one entry with markers."""
    tag = f"[{context_name}][{kind.capitalize()}]"
    lines = [f"{tag} {entry}" for entry in entries]
    if len(entries) > 1:
        lines.insert(0, f"{tag} ----- begin ({len(entries)}) -----")
        lines.append(f"{tag} ----- end -----")
    return lines


class Supervisor:
    def __init__(
        self,
        worker_body: Body,
        ui_body: Body,
        *,
        debug: bool = False,
        verbose: bool = False,
        base_path: str = config.BASE_PATH,
        functions: FunctionBundle = shared_functions,
        writer: Callable[[str], None] = print,
        exit_fn: Callable[[int], Any] = os._exit,
        poll_interval: float = config.POLL_INTERVAL_SEC,
    ) -> None:
        self.worker_body = worker_body
        self.ui_body = ui_body
        self.debug = debug
        self.verbose = verbose
        self.base_path = base_path
        self.functions = functions
        self.writer = writer
        self.exit_fn = exit_fn
        self.poll_interval = poll_interval

        self.state = SupervisorState.BOOTSTRAPPING
        self.shared: Optional[SharedState] = None
        self.ui_mirror: Optional[SharedState] = None
        self.worker: Optional[ExecutionContext] = None
        self.ui: Optional[ExecutionContext] = None
        self.contexts: List[ExecutionContext] = []
        self.disposed: List[str] = []

    def _log(self, message: str) -> None:
        self.writer(f"[Supervisor] {message}")

    # ---------------- Bootstrapping ----------------
    def bootstrap(self) -> None:
        self.shared = SharedState()
        self.ui_mirror = SharedState()
        prefs = DisplayPreferences.from_flags(debug=self.debug, verbose=self.verbose)
        namespace = process_namespace(self.shared, self.ui_mirror, self.functions, prefs, self.base_path)

        self.worker = ExecutionContext(config.WORKER_NAME)
        self.ui = ExecutionContext(config.UI_NAME)
        self.contexts = [self.worker, self.ui]

        # Every context is seeded before any of them starts.
        for ctx in self.contexts:
            broadcast(ctx, namespace)

        self.worker.start(self.worker_body)
        self.ui.start(self.ui_body)
        self.state = SupervisorState.POLLING

    # ---------------- Polling ----------------
    def sweep(self) -> int:
        """Emit and clear every non-empty stream. Returns entries emitted."""
        emitted = 0
        for ctx in self.contexts:
            for kind in STREAM_KINDS:
                # Emit first, then discard: an interrupt mid-batch re-emits
                # the batch on the next sweep instead of losing it.
                entries = ctx.streams.read(kind)
                if not entries:
                    continue
                for line in format_entries(ctx.name, kind, entries):
                    self.writer(line)
                ctx.streams.discard(kind, len(entries))
                emitted += len(entries)
        return emitted

    def poll(self) -> None:
        if self.shared is None:
            raise ContextStateError("poll() called before bootstrap()")
        while True:
            try:
                self.sweep()
                if self.shared.close_requested:
                    break
                self.shared.wait_for_close(self.poll_interval)
            except KeyboardInterrupt:
                self._log("Interrupted -> requesting close.")
                self.shared.request_close()
        self.state = SupervisorState.SHUTTING_DOWN

    # ---------------- ShuttingDown ----------------
    def shutdown(self) -> None:
        if self.shared is None or not self.shared.close_requested:
            raise ContextStateError("contexts can only be disposed after CloseWindow is set")
        self._log("Close requested -> disposing contexts...")
        for ctx in self.contexts:
            try:
                ctx.dispose()
                self.disposed.append(ctx.name)
            except Exception as e:
                self._log(f"Teardown error ({ctx.name}): {e}")

        self.sweep()
        for ctx in self.contexts:
            self._log(f"{ctx.name} context finished: {ctx.handle.status.value}")

        for ctx in self.contexts:
            ctx.variables.clear()
        gc.collect()
        self.state = SupervisorState.TERMINATED

    # ---------------- Terminated ----------------
    def terminate(self) -> None:
        if self.debug or self.verbose:
            self._log("Debug/verbose override present -> leaving process running.")
            return
        self._log("Terminating process.")
        sys.stdout.flush()
        sys.stderr.flush()
        self.exit_fn(config.FORCED_EXIT_CODE)

    def run(self) -> SupervisorState:
        self.bootstrap()
        self.poll()
        self.shutdown()
        self.terminate()
        return self.state
