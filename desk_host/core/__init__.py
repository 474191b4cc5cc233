from .state import CLOSE_WINDOW, SharedState
from .functions import FunctionBundle, shared_functions
from .prefs import STREAM_KINDS, DisplayPreferences
from .broadcast import SHARED_VARIABLES, broadcast, process_namespace
from .context import DiagnosticStreams, ExecutionContext, TaskHandle, TaskStatus
from .errors import BootstrapError, BroadcastError, ContextStateError, SetupError

__all__ = [
    "CLOSE_WINDOW",
    "SharedState",
    "FunctionBundle",
    "shared_functions",
    "STREAM_KINDS",
    "DisplayPreferences",
    "SHARED_VARIABLES",
    "broadcast",
    "process_namespace",
    "DiagnosticStreams",
    "ExecutionContext",
    "TaskHandle",
    "TaskStatus",
    "BootstrapError",
    "BroadcastError",
    "ContextStateError",
    "SetupError",
]
