from .body import run_ui
from .definition import WindowDefinition, load_window_definition
from .toolkit import load_toolkit

__all__ = ["run_ui", "WindowDefinition", "load_window_definition", "load_toolkit"]
