"""Tests for built-in traces and trace files."""

import pytest

from pagesim.trace_suite import (
    DEFAULT_CAPACITIES,
    DEFAULT_TRACE,
    TRACE_BY_KEY,
    get_trace,
    parse_trace,
    read_trace,
    write_trace,
)


def test_default_workload() -> None:
    assert len(DEFAULT_TRACE) == 33
    assert get_trace("default") == list(DEFAULT_TRACE)
    assert tuple(DEFAULT_CAPACITIES) == (3, 5, 7)


def test_get_trace_returns_copy() -> None:
    trace = get_trace("belady")
    trace.append(42)
    assert get_trace("belady") == [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]


def test_unknown_trace_lists_known_keys() -> None:
    with pytest.raises(KeyError, match="belady"):
        get_trace("nope")


def test_registry_keys() -> None:
    assert set(TRACE_BY_KEY) == {"default", "belady", "loop"}


class TestParseTrace:

    def test_whitespace_and_commas(self) -> None:
        assert parse_trace("1, 2,3\n4   5\t6") == [1, 2, 3, 4, 5, 6]

    def test_comments_and_blank_lines(self) -> None:
        text = "# workload\n1 2  # hot\n\n3\n"
        assert parse_trace(text) == [1, 2, 3]

    def test_negative_pages(self) -> None:
        assert parse_trace("-1 0 -1") == [-1, 0, -1]

    def test_empty_text(self) -> None:
        assert parse_trace("") == []

    def test_invalid_token_reports_line(self) -> None:
        with pytest.raises(ValueError, match="'x' on line 2"):
            parse_trace("1 2\n3 x")


class TestTraceFiles:

    def test_write_then_read(self, tmp_path) -> None:
        path = tmp_path / "traces" / "default.txt"
        write_trace(path, DEFAULT_TRACE)
        assert path.read_text(encoding="utf-8").splitlines()[:3] == ["1", "1", "1"]
        assert read_trace(path) == list(DEFAULT_TRACE)

    def test_read_missing_file(self, tmp_path) -> None:
        with pytest.raises(OSError):
            read_trace(tmp_path / "missing.txt")
