import pytest

from meeting_notes.errors import InvalidArgument
from meeting_notes.summarizer import rank_notes, summarize


def test_descending_count_with_first_occurrence_ties():
    notes = ["b", "a", "c", "a", "b", "d"]
    assert rank_notes(notes) == [("b", 2), ("a", 2), ("c", 1), ("d", 1)]
    assert summarize(notes, 3) == "b a c"


def test_fewer_distinct_than_k():
    assert summarize(["x", "y", "x", "z"], 10) == "x y z"


def test_zero_k_and_empty_notes():
    assert summarize(["x", "y"], 0) == ""
    assert summarize([], 5) == ""
    assert rank_notes([], 3) == []


def test_case_sensitive_surface_forms():
    assert rank_notes(["Budget", "budget", "budget"]) == [("budget", 2), ("Budget", 1)]


def test_accepts_generators():
    assert summarize((w for w in ["a", "b", "b"]), 1) == "b"


@pytest.mark.parametrize("k", [-1, -10, 2.5, "3", True, None])
def test_bad_k(k):
    with pytest.raises(InvalidArgument):
        summarize(["a"], k)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        rank_notes(["a"], -1)
