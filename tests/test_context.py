import threading

import pytest

from desk_host.core import (
    SHARED_VARIABLES,
    ContextStateError,
    DisplayPreferences,
    ExecutionContext,
    FunctionBundle,
    SharedState,
    TaskStatus,
    broadcast,
    process_namespace,
)


def test_unknown_apartment_rejected():
    with pytest.raises(ValueError):
        ExecutionContext("Worker", apartment="XYZ")


def test_start_returns_without_blocking(seeded):
    release = threading.Event()
    handle = seeded.start(lambda ctx: release.wait(5))

    assert handle.status is TaskStatus.RUNNING
    assert not handle.done()
    release.set()
    assert handle.wait(5)
    assert handle.status is TaskStatus.COMPLETED


def test_body_runs_on_its_own_thread_with_every_variable(seeded):
    seen = {}

    def body(ctx):
        seen["thread"] = threading.current_thread().name
        seen["names"] = [name for name in SHARED_VARIABLES if name in ctx.variables]

    seeded.start(body)
    seeded.dispose()

    assert seen["thread"] == "desk-host-Test"
    assert seen["names"] == list(SHARED_VARIABLES)


def test_body_failure_goes_to_error_stream(seeded):
    def body(ctx):
        raise RuntimeError("boom")

    handle = seeded.start(body)
    seeded.dispose()

    assert handle.status is TaskStatus.FAILED
    assert isinstance(handle.exception, RuntimeError)
    errors = seeded.streams.read("error")
    assert len(errors) == 1
    assert errors[0].startswith("RuntimeError: boom")


def test_start_twice_rejected(seeded):
    seeded.start(lambda ctx: None)
    with pytest.raises(ContextStateError):
        seeded.start(lambda ctx: None)


def test_dispose_sets_stop_and_joins(seeded):
    handle = seeded.start(lambda ctx: ctx.stop_event.wait())
    seeded.dispose()

    assert seeded.stop_event.is_set()
    assert handle.done()


def test_dispose_only_once(seeded):
    seeded.start(lambda ctx: None)
    seeded.dispose()
    with pytest.raises(ContextStateError):
        seeded.dispose()


def test_import_functions(tmp_path):
    bundle = FunctionBundle()

    @bundle.register
    def greet(name):
        return f"hi {name}"

    ctx = ExecutionContext("Worker")
    broadcast(ctx, process_namespace(SharedState(), SharedState(), bundle, DisplayPreferences(), str(tmp_path)))
    ctx.import_functions()

    assert ctx.variables["greet"]("ui") == "hi ui"


def test_writers_follow_display_preferences(tmp_path):
    prefs = DisplayPreferences(information=True, verbose=False, warning=True, error=True, debug=False)
    ctx = ExecutionContext("Worker")
    broadcast(ctx, process_namespace(SharedState(), SharedState(), FunctionBundle(), prefs, str(tmp_path)))

    ctx.write_information("info")
    ctx.write_verbose("hidden")
    ctx.write_warning("warn")
    ctx.write_error("err")
    ctx.write_debug("hidden")

    assert ctx.streams.pending() == ["information", "warning", "error"]


def test_drain_is_exactly_once(seeded):
    seeded.streams.append("warning", "a")
    seeded.streams.append("warning", "b")

    assert seeded.streams.drain("warning") == ["a", "b"]
    assert seeded.streams.read("warning") == []
    assert seeded.streams.drain("warning") == []


def test_preferences_from_flags():
    prefs = DisplayPreferences.from_flags(debug=True)
    assert prefs.enabled("debug") is True
    assert prefs.enabled("verbose") is False
    assert DisplayPreferences.from_flags(verbose=True).enabled("verbose") is True
    with pytest.raises(ValueError):
        prefs.enabled("trace")


def test_stream_view_is_live(seeded):
    warnings = seeded.streams["warning"]
    warnings.append("low disk")

    assert seeded.streams.read("warning") == ["low disk"]
    assert warnings == ["low disk"]
    assert len(warnings) == 1

    warnings.clear()
    assert seeded.streams.read("warning") == []
    assert not warnings


def test_unknown_stream_kind(seeded):
    with pytest.raises(KeyError):
        seeded.streams["trace"]


def test_discard_keeps_later_entries(seeded):
    seeded.streams.append("information", "a")
    seeded.streams.append("information", "b")
    seen = seeded.streams.read("information")
    seeded.streams.append("information", "c")

    seeded.streams.discard("information", len(seen))
    assert seeded.streams.read("information") == ["c"]
