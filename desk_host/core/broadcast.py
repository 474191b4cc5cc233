"""desk_host/core/broadcast.py
Seeds the fixed set of shared variables into an execution context before it
starts. Contexts cannot see each other's locals, so this copy is the only
wiring between them.

Handles (`shared`, `ui_mirror`) are passed by reference; the function bundle
and base path are captured as they are at broadcast time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, Mapping

from .errors import BroadcastError
from .functions import FunctionBundle
from .prefs import STREAM_KINDS, DisplayPreferences
from .state import SharedState

if TYPE_CHECKING:
    from .context import ExecutionContext

SHARED_VARIABLES = (
    "shared",
    "ui_mirror",
    "shared_functions",
    "information_preference",
    "verbose_preference",
    "warning_preference",
    "error_preference",
    "debug_preference",
    "base_path",
)

_LIVE = frozenset(("shared", "ui_mirror"))


def preference_name(kind: str) -> str:
    return f"{kind}_preference"


def process_namespace(
    shared: SharedState,
    ui_mirror: SharedState,
    functions: FunctionBundle,
    prefs: DisplayPreferences,
    base_path: str,
) -> Dict[str, Any]:
    """Build the process-level namespace that holds every shared variable."""
    namespace: Dict[str, Any] = {
        "shared": shared,
        "ui_mirror": ui_mirror,
        "shared_functions": functions,
        "base_path": base_path,
    }
    for kind in STREAM_KINDS:
        namespace[preference_name(kind)] = prefs.enabled(kind)
    return namespace


def _capture(value: Any) -> Any:
    if isinstance(value, FunctionBundle):
        return value.copy()
    return value


def broadcast(
    context: "ExecutionContext",
    namespace: Mapping[str, Any],
    names: Iterable[str] = SHARED_VARIABLES,
) -> None:
    """Copy each named variable from `namespace` into `context.variables`."""
    if context.started:
        raise BroadcastError(f"context {context.name!r} already started; broadcast must come first")

    names = tuple(names)
    missing = [name for name in names if name not in namespace]
    if missing:
        raise BroadcastError(f"cannot seed {context.name!r}: missing shared variable(s) {', '.join(missing)}")

    for name in names:
        value = namespace[name]
        context.variables[name] = value if name in _LIVE else _capture(value)
