"""desk_host/core/prefs.py
Display preferences for the five diagnostic streams.
"""

from __future__ import annotations

from dataclasses import dataclass

from desk_host import config

STREAM_KINDS = ("information", "verbose", "warning", "error", "debug")


@dataclass(frozen=True)
class DisplayPreferences:
    information: bool = True
    verbose: bool = False
    warning: bool = True
    error: bool = True
    debug: bool = False

    @classmethod
    def from_flags(cls, *, debug: bool = False, verbose: bool = False) -> "DisplayPreferences":
        return cls(
            information=config.SHOW_INFORMATION,
            verbose=verbose,
            warning=config.SHOW_WARNING,
            error=config.SHOW_ERROR,
            debug=debug,
        )

    def enabled(self, kind: str) -> bool:
        if kind not in STREAM_KINDS:
            raise ValueError(f"unknown stream kind: {kind!r}")
        return getattr(self, kind)
