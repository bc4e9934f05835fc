import pytest
from pathutil import (
    EmptyPathError,
    InvalidArgumentError,
    SegmentIndexError,
    get_segment,
    get_segment_count,
    iter_segments,
    segments,
)


def test_segments_absolute_starts_with_root_segment():
    assert segments("/node/site") == ["", "node", "site"]


def test_segments_are_canonical():
    assert segments("node\\.\\site\\..\\css") == ["node", "css"]


def test_segments_strip_scheme():
    assert segments("file:///node/site") == ["", "node", "site"]


def test_segments_empty_path():
    assert segments("") == [""]


@pytest.mark.parametrize(
    "idx, expected",
    [(0, ""), (1, "node"), (2, "site"), (3, "main.js")],
)
def test_get_segment(idx, expected):
    assert get_segment("/node/site/main.js", idx) == expected


def test_get_segment_relative():
    assert get_segment("test/hello", 0) == "test"
    assert get_segment("test/hello", 1) == "hello"


def test_get_segment_with_scheme():
    assert get_segment("file:///node/site", 1) == "node"


@pytest.mark.parametrize("idx", [-1, 4, 100])
def test_get_segment_out_of_bounds(idx):
    with pytest.raises(SegmentIndexError) as exc_info:
        get_segment("/node/site/main.js", idx)
    assert exc_info.value.index == idx
    assert exc_info.value.count == 4
    assert isinstance(exc_info.value, IndexError)


def test_get_segment_empty_path():
    with pytest.raises(EmptyPathError):
        get_segment("", 0)


def test_get_segment_type_checked():
    with pytest.raises(InvalidArgumentError):
        get_segment(None, 0)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("test/hello", 2),
        ("/node/site", 3),
        ("file:///a/b", 3),
        ("/", 0),
        ("file:///", 0),
        ("a/..", 0),
    ],
)
def test_get_segment_count(path, expected):
    assert get_segment_count(path) == expected


def test_get_segment_count_empty_path():
    with pytest.raises(EmptyPathError):
        get_segment_count("")


def test_iter_segments_in_order():
    seen: list[str] = []
    iter_segments("/node/./site", seen.append)
    assert seen == ["", "node", "site"]


def test_iter_segments_root_only_visits_empty_segments():
    seen: list[str] = []
    iter_segments("/", seen.append)
    assert seen == ["", ""]


def test_iter_segments_returns_none():
    assert iter_segments("a/b", lambda segment: segment.upper()) is None
