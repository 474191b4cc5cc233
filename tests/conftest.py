import threading

import pytest

from desk_host.core import (
    DisplayPreferences,
    ExecutionContext,
    FunctionBundle,
    SharedState,
    broadcast,
    process_namespace,
)


class FakeWindow:
    """Stands in for a Tk window; `user_close()` simulates the close button."""

    def __init__(self) -> None:
        self.handlers = []
        self.shown = threading.Event()
        self._close = threading.Event()

    def on_closed(self, handler) -> None:
        self.handlers.append(handler)

    def user_close(self) -> None:
        self._close.set()

    def show(self, stop_event=None) -> None:
        self.shown.set()
        while stop_event is None or not stop_event.is_set():
            if self._close.wait(0.01):
                for handler in self.handlers:
                    handler()
                return


class FakeWindowProvider:
    def __init__(self, window: FakeWindow) -> None:
        self.window = window
        self.base_path = None

    def __call__(self, base_path: str) -> "FakeWindowProvider":
        self.base_path = base_path
        return self

    def create(self) -> FakeWindow:
        return self.window


@pytest.fixture
def window():
    return FakeWindow()


@pytest.fixture
def provider(window):
    return FakeWindowProvider(window)


@pytest.fixture
def namespace(tmp_path):
    return process_namespace(
        SharedState(),
        SharedState(),
        FunctionBundle(),
        DisplayPreferences(verbose=True, debug=True),
        str(tmp_path),
    )


@pytest.fixture
def seeded(namespace):
    """A broadcast-seeded context that is disposed after the test."""
    ctx = ExecutionContext("Test")
    broadcast(ctx, namespace)
    yield ctx
    if not ctx.disposed:
        ctx.dispose()
