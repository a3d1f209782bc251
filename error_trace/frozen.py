from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TextIO, cast

from error_trace.chain import iter_chain
from error_trace.render import ColorTraceFormatter, TraceFormatter, trace, trace_with_emphasis

log = logging.getLogger(__name__)


class ErrorTrace:
    """Mixin giving an error class ``trace()``, ``trace_with_emphasis()`` and ``freeze()``."""

    def trace(self, *, detailed: bool = False) -> TraceFormatter:
        return trace(self, detailed=detailed)

    def trace_with_emphasis(
        self,
        *,
        detailed: bool = False,
        color: bool | None = None,
        stream: TextIO | None = None,
    ) -> ColorTraceFormatter:
        return trace_with_emphasis(self, detailed=detailed, color=color, stream=stream)

    def freeze(self) -> FrozenTrace:
        return freeze(self)


@dataclass(kw_only=True, frozen=True, eq=False)
class FrozenTrace(ErrorTrace):
    """Owned copy of an error chain's messages, detached from the original errors."""

    message: str
    next: FrozenTrace | None = field(default=None, repr=False)

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrozenTrace):
            return NotImplemented
        left: FrozenTrace | None = self
        right: FrozenTrace | None = other
        while left is not None and right is not None:
            if left is right:
                return True
            if left.message != right.message:
                return False
            left, right = left.next, right.next
        return left is None and right is None

    def __hash__(self) -> int:
        return hash(tuple(str(level) for level in iter_chain(self)))

    def source(self) -> FrozenTrace | None:
        return self.next

    @staticmethod
    def from_message(message: str) -> FrozenTrace:
        return FrozenTrace(message=message)

    @staticmethod
    def from_messages(messages: Sequence[str]) -> FrozenTrace:
        """Build a chain from plain messages, outermost first."""
        if not messages:
            raise ValueError("trace must contain at least one level")
        snapshot: FrozenTrace | None = None
        for message in reversed(messages):
            snapshot = FrozenTrace(message=message, next=snapshot)
        assert snapshot is not None
        return snapshot

    @staticmethod
    def from_source(message: str, err: object) -> FrozenTrace:
        """Build a snapshot with ``message`` on top of a frozen copy of ``err``."""
        return FrozenTrace(message=message, next=freeze(err))

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] | None = None
        for level in reversed(list(iter_chain(self))):
            payload = {"message": str(level), "next": payload}
        return cast(dict[str, object], payload)

    @staticmethod
    def from_dict(raw: object) -> FrozenTrace:
        messages: list[str] = []
        current: object = raw
        while current is not None:
            level = _expect_json_object(current, context="trace level")
            message = level.get("message")
            if not isinstance(message, str):
                raise ValueError("trace message must be a string")
            messages.append(message)
            current = level.get("next")

        log.debug("decoded frozen trace with %d level(s)", len(messages))
        return FrozenTrace.from_messages(messages)

    def to_json(self, *, indent: int | None = 2) -> str:
        try:
            return json.dumps(self.to_dict(), indent=indent)
        except RecursionError as exc:
            raise ValueError("trace is nested too deeply to encode as JSON") from exc

    @staticmethod
    def from_json(text: str) -> FrozenTrace:
        try:
            loaded = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"trace is not valid JSON: {exc.msg}") from exc
        except RecursionError as exc:
            raise ValueError("trace is nested too deeply to decode from JSON") from exc
        return FrozenTrace.from_dict(loaded)


def freeze(err: object, *, max_depth: int | None = None) -> FrozenTrace:
    """Copy the display text of every level of ``err``'s chain into a snapshot."""
    messages = [str(level) for level in iter_chain(err, max_depth=max_depth)]
    if not messages:
        raise ValueError("cannot freeze an empty error chain")
    log.debug("froze error chain with %d level(s)", len(messages))
    return FrozenTrace.from_messages(messages)


def _expect_json_object(raw: object, *, context: str) -> dict[str, object]:
    if not isinstance(raw, dict):
        raise ValueError(f"{context} must be an object")
    raw_obj = cast(dict[object, object], raw)
    for key_obj in raw_obj.keys():
        if not isinstance(key_obj, str):
            raise ValueError(f"{context} keys must be strings")
    return cast(dict[str, object], raw_obj)
