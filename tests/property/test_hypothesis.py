"""Property-based tests using Hypothesis."""
import pytest

try:
    from hypothesis import given, settings
    import hypothesis.strategies as st
    HAS_HYPOTHESIS = True
except ImportError:
    HAS_HYPOTHESIS = False

from pathutil import (
    canonicalize,
    get_root,
    get_segment_count,
    is_absolute,
    is_relative,
    iter_segments,
    join,
    to_absolute,
    to_relative,
)
from tests.helpers.asserts import assert_canonical

pytestmark = pytest.mark.skipif(not HAS_HYPOTHESIS, reason="hypothesis not installed")

# Raw paths carry no ":", so no scheme or drive root appears by accident.
raw_paths = st.text(alphabet="/\\ab._-", max_size=50)
forward_paths = st.text(alphabet="/ab._-", max_size=50)
segment_lists = st.lists(st.sampled_from(["a", "b", "C:", ".", ".."]), max_size=6)
roots = st.sampled_from(["/", "\\", "C:/", "C:\\", "d:/"])


@given(path=raw_paths)
@settings(max_examples=200)
def test_canonicalize_idempotent(path):
    """Canonicalizing a canonical path gives the same path."""
    canonical = canonicalize(path)
    assert canonicalize(canonical) == canonical
    assert_canonical(canonical)


@given(path=raw_paths.filter(bool))
@settings(max_examples=100)
def test_segment_count_matches_visits(path):
    """get_segment_count counts the visited segments, or 0 for a bare root."""
    seen: list[str] = []
    iter_segments(path, seen.append)
    expected = 0 if all(part == "" for part in seen) else len(seen)
    assert get_segment_count(path) == expected


@given(root=roots, first_parts=segment_lists, second=forward_paths)
@settings(max_examples=100)
def test_join_keeps_root_of_absolute_first_element(root, first_parts, second):
    joined = join([root + "/".join(first_parts), second])
    assert joined.startswith(get_root(joined))
    assert get_root(joined) == get_root(root)


@given(root=roots, path_parts=segment_lists, base_parts=segment_lists)
@settings(max_examples=200)
def test_relative_absolute_round_trip(root, path_parts, base_parts):
    """to_absolute undoes to_relative for paths sharing a root."""
    path = root + "/".join(path_parts)
    base = root + "/".join(base_parts)
    assert to_absolute(to_relative(path, base), base) == canonicalize(path)


@given(path=st.text(min_size=1, max_size=30))
@settings(max_examples=200)
def test_absolute_and_relative_are_exclusive(path):
    assert is_absolute(path) != is_relative(path)


def test_empty_path_absolute_relative_truth_table():
    assert is_absolute("") is False
    assert is_relative("") is True
