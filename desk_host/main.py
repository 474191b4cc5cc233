"""desk_host/main.py
Desktop host entrypoint.

Starts:
- Worker context (background thread)
- UI context (Tkinter window on its own thread)
- Supervisor loop on the main thread
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from desk_host.core import BootstrapError, SetupError
from desk_host.supervisor import Supervisor
from desk_host.ui import load_toolkit, run_ui
from desk_host.worker import run_worker


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="desk-host", description="Run the desktop host.")
    parser.add_argument("--debug", action="store_true", help="show the debug stream and keep the process alive on exit")
    parser.add_argument("--verbose", action="store_true", help="show the verbose stream and keep the process alive on exit")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        load_toolkit()
    except SetupError as e:
        print(f"[Main] Setup failed: {e}")
        return 1

    print("[Main] Starting contexts...")
    supervisor = Supervisor(run_worker, run_ui, debug=args.debug, verbose=args.verbose)
    try:
        supervisor.run()
    except BootstrapError as e:
        print(f"[Main] Bootstrap failed: {e}")
        return 1

    print("[Main] Exiting...")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
