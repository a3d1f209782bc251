from error_trace.lib import FrozenTrace, TraceError, freeze, render, trace, trace_with_emphasis


def test_example_with_single_cause() -> None:
    err = TraceError("Oh no, something went wrong!", TraceError("A specific reason"))

    assert str(trace(err)) == (
        "Oh no, something went wrong!\n\nCaused by:\n o A specific reason\n\n"
    )


def test_message_without_cause() -> None:
    assert str(render("Hello, world!")) == "Hello, world!"


def test_frozen_and_live_traces_render_identically() -> None:
    err = TraceError("top", TraceError("middle", ValueError("leaf")))
    frozen = freeze(err)

    assert isinstance(frozen, FrozenTrace)
    assert str(trace(frozen)) == str(trace(err))
    assert str(trace_with_emphasis(frozen, color=False)) == str(trace(err))
