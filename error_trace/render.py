from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from error_trace.chain import cause_of, iter_chain
from error_trace.style import Colors, emphasize, supports_color

CAUSED_BY_HEADER = "Caused by:"
CAUSE_MARKER = "o"


@dataclass(kw_only=True, frozen=True)
class TraceFormatter:
    """Displayable view over a message and the chain of errors behind it.

    ``str()`` renders each cause with ``str``; the alternate format spec
    (``f"{formatter:#}"``) or ``detailed=True`` renders them with ``repr``.
    """

    message: str
    err: object | None = None
    detailed: bool = False
    max_depth: int | None = None

    def __str__(self) -> str:
        return self.render(detailed=self.detailed)

    def __format__(self, format_spec: str) -> str:
        detailed = self.detailed
        if format_spec.startswith("#"):
            detailed = True
            format_spec = format_spec[1:]
        return format(self.render(detailed=detailed), format_spec)

    def render(self, *, detailed: bool = False) -> str:
        return _format_trace(
            self.message,
            self.err,
            detailed=detailed,
            max_depth=self.max_depth,
            color=False,
        )


@dataclass(kw_only=True, frozen=True)
class ColorTraceFormatter(TraceFormatter):
    """Like :class:`TraceFormatter`, with bold/red emphasis on the text.

    ``color=None`` defers to :func:`supports_color` for ``stream``; without
    color support the output equals the plain rendering.
    """

    color: bool | None = None
    stream: TextIO | None = None

    def render(self, *, detailed: bool = False) -> str:
        color = self.color
        if color is None:
            color = supports_color(self.stream)
        return _format_trace(
            self.message,
            self.err,
            detailed=detailed,
            max_depth=self.max_depth,
            color=color,
        )


def render(
    message: str,
    err: object | None = None,
    *,
    detailed: bool = False,
    max_depth: int | None = None,
) -> TraceFormatter:
    return TraceFormatter(message=message, err=err, detailed=detailed, max_depth=max_depth)


def render_with_emphasis(
    message: str,
    err: object | None = None,
    *,
    detailed: bool = False,
    max_depth: int | None = None,
    color: bool | None = None,
    stream: TextIO | None = None,
) -> ColorTraceFormatter:
    return ColorTraceFormatter(
        message=message,
        err=err,
        detailed=detailed,
        max_depth=max_depth,
        color=color,
        stream=stream,
    )


def trace(err: object, *, detailed: bool = False) -> TraceFormatter:
    """Render ``err`` using its own text as the top message."""
    return render(str(err), cause_of(err), detailed=detailed)


def trace_with_emphasis(
    err: object,
    *,
    detailed: bool = False,
    color: bool | None = None,
    stream: TextIO | None = None,
) -> ColorTraceFormatter:
    return render_with_emphasis(
        str(err), cause_of(err), detailed=detailed, color=color, stream=stream
    )


def toplevel(message: str, err: object) -> TraceFormatter:
    """Render a one-off top-level message above ``err`` and its causes."""
    return render(message, err)


def toplevel_with_emphasis(
    message: str,
    err: object,
    *,
    detailed: bool = False,
    color: bool | None = None,
    stream: TextIO | None = None,
) -> ColorTraceFormatter:
    return render_with_emphasis(
        message, err, detailed=detailed, color=color, stream=stream
    )


def _format_trace(
    message: str,
    err: object | None,
    *,
    detailed: bool,
    max_depth: int | None,
    color: bool,
) -> str:
    represent = repr if detailed else str
    parts = [emphasize(message, Colors.BOLD, enabled=color)]
    levels = list(iter_chain(err, max_depth=max_depth))
    if not levels:
        return parts[0]

    parts.append("\n\n")
    parts.append(emphasize(CAUSED_BY_HEADER, Colors.RED, Colors.BOLD, enabled=color))
    for level in levels:
        parts.append(f"\n {CAUSE_MARKER} ")
        parts.append(emphasize(represent(level), Colors.BOLD, enabled=color))
    parts.append("\n\n")
    return "".join(parts)
