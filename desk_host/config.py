"""desk_host/config.py
Central configuration for the desktop host.

Notes:
- Every value can be overridden with an environment variable.
- This module is imported by core/ui/supervisor modules.
"""

import os


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# ================= Paths =================
# Folder holding window.json and assets (defaults to the package folder)
BASE_PATH = os.getenv("DESK_HOST_BASE_PATH", os.path.dirname(os.path.abspath(__file__)))

# ================= Supervisor =================
# Upper bound between two checks of the shutdown flag
POLL_INTERVAL_SEC = float(os.getenv("DESK_HOST_POLL_INTERVAL", "0.05"))
FORCED_EXIT_CODE = 0

# ================= Contexts =================
WORKER_NAME = "Worker"
UI_NAME = "UI"
APARTMENT = "STA"  # single-threaded, UI-affine

# ================= Display Preferences =================
# Verbose and debug streams are switched on by --verbose / --debug
SHOW_INFORMATION = _env_flag("DESK_HOST_SHOW_INFORMATION", True)
SHOW_WARNING = _env_flag("DESK_HOST_SHOW_WARNING", True)
SHOW_ERROR = _env_flag("DESK_HOST_SHOW_ERROR", True)

# ================= Window =================
WINDOW_FILE = "window.json"
WINDOW_TITLE = "Desk Host"
WINDOW_WIDTH = 640
WINDOW_HEIGHT = 400
WINDOW_STOP_CHECK_MS = 100
