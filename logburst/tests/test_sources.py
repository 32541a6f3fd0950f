"""
tests/test_sources.py

Tests for ingest/sources.py: glob discovery and gzip-transparent opening.
All files live under pytest's tmp_path.
"""

from __future__ import annotations

import gzip

import pytest

from logburst.ingest.sources import LogSourceError, discover_files, open_log


# ---------------------------------------------------------------------------
# discover_files
# ---------------------------------------------------------------------------

class TestDiscoverFiles:

    def test_sorted_matches(self, tmp_path):
        for name in ("access.log.2.gz", "access.log", "access.log.1"):
            (tmp_path / name).write_text("")
        files = discover_files(str(tmp_path / "access.log*"))
        assert [p.rsplit("/", 1)[-1] for p in files] == [
            "access.log", "access.log.1", "access.log.2.gz",
        ]

    def test_single_path(self, tmp_path):
        path = tmp_path / "access.log"
        path.write_text("")
        assert discover_files(str(path)) == [str(path)]

    def test_no_match_raises(self, tmp_path):
        pattern = str(tmp_path / "missing*.log")
        with pytest.raises(LogSourceError) as excinfo:
            discover_files(pattern)
        assert excinfo.value.source == pattern
        assert pattern in str(excinfo.value)


# ---------------------------------------------------------------------------
# open_log
# ---------------------------------------------------------------------------

class TestOpenLog:

    def test_plain_file(self, tmp_path):
        path = tmp_path / "access.log"
        path.write_text("one\ntwo\n")
        with open_log(str(path)) as f:
            assert [line.rstrip("\n") for line in f] == ["one", "two"]

    def test_gzip_file(self, tmp_path):
        path = tmp_path / "access.log.gz"
        with gzip.open(path, "wt", encoding="utf-8") as f:
            f.write("one\ntwo\n")
        with open_log(str(path)) as f:
            assert [line.rstrip("\n") for line in f] == ["one", "two"]

    def test_invalid_utf8_replaced(self, tmp_path):
        path = tmp_path / "access.log"
        path.write_bytes(b"ok \xff\xfe bytes\n")
        with open_log(str(path)) as f:
            assert "�" in f.read()

    def test_missing_file_raises(self, tmp_path):
        path = str(tmp_path / "nope.log")
        with pytest.raises(LogSourceError) as excinfo:
            with open_log(path):
                pass
        assert excinfo.value.source == path

    def test_corrupt_gzip_raises(self, tmp_path):
        path = tmp_path / "access.log.gz"
        path.write_bytes(b"this is not gzip data\n")
        with pytest.raises(LogSourceError) as excinfo:
            with open_log(str(path)) as f:
                f.read()
        assert excinfo.value.source == str(path)

    def test_truncated_gzip_raises(self, tmp_path):
        path = tmp_path / "access.log.gz"
        data = gzip.compress(b"".join(f"line {i}\n".encode() for i in range(1000)))
        path.write_bytes(data[: len(data) // 2])
        with pytest.raises(LogSourceError):
            with open_log(str(path)) as f:
                f.read()
