from error_trace.chain import TraceableError, cause_of, iter_causes, iter_chain
from error_trace.errors import TraceError
from error_trace.frozen import ErrorTrace, FrozenTrace, freeze
from error_trace.render import (
    ColorTraceFormatter,
    TraceFormatter,
    render,
    render_with_emphasis,
    toplevel,
    toplevel_with_emphasis,
    trace,
    trace_with_emphasis,
)
from error_trace.style import supports_color

__all__ = [
    "ColorTraceFormatter",
    "ErrorTrace",
    "FrozenTrace",
    "TraceError",
    "TraceFormatter",
    "TraceableError",
    "cause_of",
    "freeze",
    "iter_causes",
    "iter_chain",
    "render",
    "render_with_emphasis",
    "supports_color",
    "toplevel",
    "toplevel_with_emphasis",
    "trace",
    "trace_with_emphasis",
]
