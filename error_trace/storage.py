import os
import tempfile
from pathlib import Path

from error_trace.frozen import FrozenTrace


def read_snapshot(path: Path) -> FrozenTrace:
    return FrozenTrace.from_json(path.read_text(encoding="utf-8"))


def write_snapshot(path: Path, snapshot: FrozenTrace) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    _atomic_write_text(path, snapshot.to_json() + "\n")


def _atomic_write_text(path: Path, content: str) -> None:
    parent = path.parent
    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as temp_file:
            temp_path = Path(temp_file.name)
            temp_file.write(content)
            temp_file.flush()
            os.fsync(temp_file.fileno())

        os.replace(temp_path, path)
    except Exception:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise
