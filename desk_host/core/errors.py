"""desk_host/core/errors.py
Fatal bootstrap errors. Anything raised from here ends the process before
(or instead of) the polling loop.
"""

from __future__ import annotations


class BootstrapError(Exception):
    """Base class for unrecoverable setup problems."""


class SetupError(BootstrapError):
    """A dependency the UI toolkit needs could not be loaded."""


class BroadcastError(BootstrapError):
    """A shared variable could not be seeded into a context."""


class ContextStateError(BootstrapError):
    """A context was started or disposed out of order."""
