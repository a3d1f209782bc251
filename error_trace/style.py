import os
import sys
from typing import TextIO


class Colors:
    """ANSI escape codes used for emphasized traces."""

    RED = "\033[31m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


def supports_color(stream: TextIO | None = None) -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True

    target = stream if stream is not None else sys.stderr
    isatty = getattr(target, "isatty", None)
    return bool(isatty is not None and isatty())


def emphasize(text: str, *codes: str, enabled: bool = True) -> str:
    if not enabled or not codes or not text:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"
