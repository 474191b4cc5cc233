"""desk_host/ui/toolkit.py
Checks that the UI toolkit can be loaded before any context is created.
"""

from __future__ import annotations

import importlib

from desk_host.core.errors import SetupError

REQUIRED_MODULES = ("tkinter", "PIL.Image", "PIL.ImageTk")


def load_toolkit() -> None:
    for name in REQUIRED_MODULES:
        try:
            importlib.import_module(name)
        except ImportError as e:
            raise SetupError(f"UI toolkit dependency {name!r} failed to load: {e}") from e
