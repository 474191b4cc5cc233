"""desk_host/ui/body.py
UI context body: builds the window and raises the shutdown flag when the
user closes it.
"""

from __future__ import annotations

from typing import Callable, Optional

from desk_host.core import CLOSE_WINDOW, ExecutionContext


def run_ui(ctx: ExecutionContext, provider_factory: Optional[Callable] = None) -> None:
    if provider_factory is None:
        from desk_host.ui.window import TkWindowProvider

        provider_factory = TkWindowProvider

    ctx.import_functions()
    shared = ctx.lookup("shared")

    window = provider_factory(ctx.lookup("base_path")).create()
    window.on_closed(lambda: shared.set(CLOSE_WINDOW, True))
    ctx.write_verbose("Window loaded; waiting for close")

    window.show(ctx.stop_event)
    ctx.write_verbose("Window closed")
