from pathlib import Path

import pytest

from error_trace.frozen import FrozenTrace
from error_trace.storage import read_snapshot, write_snapshot


def test_write_then_read_snapshot(tmp_path: Path) -> None:
    path = tmp_path / "traces" / "failure.json"
    snapshot = FrozenTrace.from_messages(["top", "middle", "leaf"])

    write_snapshot(path, snapshot)

    assert read_snapshot(path) == snapshot
    assert sorted(p.name for p in path.parent.iterdir()) == ["failure.json"]


def test_write_snapshot_replaces_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "failure.json"
    write_snapshot(path, FrozenTrace.from_message("old"))

    write_snapshot(path, FrozenTrace.from_message("new"))

    assert read_snapshot(path) == FrozenTrace.from_message("new")


def test_failed_write_leaves_no_temp_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "failure.json"

    def _fail_replace(src: object, dst: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr("error_trace.storage.os.replace", _fail_replace)

    with pytest.raises(OSError, match="disk full"):
        write_snapshot(path, FrozenTrace.from_message("lost"))

    assert not path.exists()
    assert list(tmp_path.glob(".failure.json.*.tmp")) == []
