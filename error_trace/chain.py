from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Protocol, runtime_checkable

log = logging.getLogger(__name__)


@runtime_checkable
class TraceableError(Protocol):
    """Anything with a display string and, optionally, an immediate cause.

    Exceptions satisfy this without a ``source`` method: their cause is read
    from ``__cause__``/``__context__`` by :func:`cause_of`.
    """

    def source(self) -> TraceableError | None: ...


def cause_of(err: object) -> object | None:
    source = getattr(err, "source", None)
    if callable(source):
        return source()

    if isinstance(err, BaseException):
        if err.__cause__ is not None:
            return err.__cause__
        if not err.__suppress_context__:
            return err.__context__

    return None


def iter_chain(err: object | None, *, max_depth: int | None = None) -> Iterator[object]:
    """Yield ``err``, its cause, its cause's cause and so on.

    The walk stops at the first level without a cause. Cyclic chains never
    terminate unless ``max_depth`` is given.
    """
    current = err
    depth = 0
    while current is not None:
        if max_depth is not None and depth >= max_depth:
            log.debug("error chain truncated at depth %d", max_depth)
            return
        yield current
        depth += 1
        current = cause_of(current)


def iter_causes(err: object, *, max_depth: int | None = None) -> Iterator[object]:
    return iter_chain(cause_of(err), max_depth=max_depth)
