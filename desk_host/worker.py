"""desk_host/worker.py
Worker context body. Background work for the application goes here; for now
the worker only wires itself up and returns.
"""

from __future__ import annotations

from desk_host.core import ExecutionContext


def run_worker(ctx: ExecutionContext) -> None:
    ctx.import_functions()
    ctx.write_verbose(f"Worker ready (base path: {ctx.lookup('base_path')})")
