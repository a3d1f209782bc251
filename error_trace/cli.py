from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any

from error_trace.errors import TraceError
from error_trace.frozen import FrozenTrace
from error_trace.render import trace_with_emphasis
from error_trace.storage import read_snapshot, write_snapshot

log = logging.getLogger(__name__)

COLOR_MODES = ("auto", "always", "never")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="error-trace")
    parser.add_argument(
        "-v",
        "--verbose",
        action=EnvAction,
        env_var="ERROR_TRACE_VERBOSE",
        nargs=0,
        help="show more detailed log messages",
    )
    parser.add_argument(
        "--color",
        action=EnvAction,
        env_var="ERROR_TRACE_COLOR",
        default="auto",
        required=False,
        choices=COLOR_MODES,
        help="when to emphasize output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="render a frozen trace")
    render_parser.add_argument(
        "file", nargs="?", help="trace JSON file (defaults to stdin)"
    )
    render_parser.add_argument(
        "--detailed",
        action=EnvAction,
        env_var="ERROR_TRACE_DETAILED",
        nargs=0,
        help="render each cause with its detailed representation",
    )

    wrap_parser = subparsers.add_parser(
        "wrap", help="wrap a frozen trace under a new top-level message"
    )
    wrap_parser.add_argument("message", help="new top-level message")
    wrap_parser.add_argument(
        "file", nargs="?", help="trace JSON file (defaults to stdin)"
    )
    wrap_parser.add_argument("-o", "--output", help="write the trace to this file")

    freeze_parser = subparsers.add_parser(
        "freeze", help="build a frozen trace from messages, outermost first"
    )
    freeze_parser.add_argument("message", help="top-level message")
    freeze_parser.add_argument("causes", nargs="*", help="cause messages")
    freeze_parser.add_argument("-o", "--output", help="write the trace to this file")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose is not None else logging.INFO,
        format="%(message)s",
    )

    color_mode = args.color or "auto"
    if color_mode not in COLOR_MODES:
        parser.error(f"invalid color mode: {color_mode!r}")
    color = _color_setting(color_mode)

    try:
        if args.command == "render":
            snapshot = _load(args.file)
            formatter = snapshot.trace_with_emphasis(
                detailed=args.detailed is not None,
                color=color,
                stream=sys.stdout,
            )
            print(formatter)
            return 0

        elif args.command == "wrap":
            snapshot = FrozenTrace.from_source(args.message, _load(args.file))
            _emit(snapshot, args.output)
            return 0

        assert args.command == "freeze"
        snapshot = FrozenTrace.from_messages([args.message, *args.causes])
        _emit(snapshot, args.output)
        return 0
    except (OSError, ValueError) as exc:
        failure = TraceError("failed to process trace", exc)
        print(trace_with_emphasis(failure, color=color, stream=sys.stderr), file=sys.stderr)
        return 1


def _color_setting(mode: str) -> bool | None:
    if mode == "always":
        return True
    if mode == "never":
        return False
    return None


def _load(file: str | None) -> FrozenTrace:
    if file is None or file == "-":
        log.debug("reading trace from stdin")
        return FrozenTrace.from_json(sys.stdin.read())

    log.debug("reading trace from %s", file)
    return read_snapshot(Path(file))


def _emit(snapshot: FrozenTrace, output: str | None) -> None:
    if output is None:
        print(snapshot.to_json())
        return

    write_snapshot(Path(output), snapshot)
    log.info("wrote trace: %s", output)


class EnvAction(argparse.Action):
    """ArgumentParser Action for options with an env var fallback"""

    def __init__(
        self,
        help: str,
        env_var: str = "",
        required: bool = True,
        default: Any = None,
        nargs: str | int | None = None,
        **kwargs: Any,
    ) -> None:
        if default is not None and env_var:
            help += f" (default: {default}, env: {env_var})"
        elif default is not None:
            help += f" (default: {default})"
        elif env_var:
            help += f" (env: {env_var})"

        if env_var and env_var in os.environ:
            default = os.environ[env_var]
            if default == "":
                default = None

        if default is not None or nargs == 0:
            required = False

        super(EnvAction, self).__init__(
            help=help,
            default=default,
            required=required,
            nargs=nargs,
            **kwargs,
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        _ = parser
        _ = option_string
        if self.nargs == 0:
            setattr(namespace, self.dest, True)
        else:
            setattr(namespace, self.dest, values)
