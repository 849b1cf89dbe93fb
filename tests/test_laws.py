"""Property tests: the algebraic laws every Result call site relies on."""

from __future__ import annotations

from typing import Any, NoReturn

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from resultwire import (
    Failure,
    Success,
    and_then,
    as_dict,
    combine_all,
    combine_all_errors,
    failure,
    from_dict,
    is_failure,
    is_success,
    map,
    match,
    unwrap_or,
)

pytestmark = pytest.mark.unit

payloads = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.text(max_size=10),
    st.lists(st.integers(), max_size=3),
)
results = st.one_of(payloads.map(Success), payloads.map(Failure))


def probe(*_args: Any) -> NoReturn:
    raise AssertionError("probe must not be called")


@given(results)
@settings(deadline=None, derandomize=True)
def test_exactly_one_predicate_holds(result: Any) -> None:
    assert is_success(result) != is_failure(result)


@given(payloads)
@settings(deadline=None, derandomize=True)
def test_map_law(x: Any) -> None:
    assert map(Success(x), repr) == Success(repr(x))
    assert map(Failure(x), probe) == Failure(x)


@given(payloads)
@settings(deadline=None, derandomize=True)
def test_and_then_identity(x: Any) -> None:
    def step(v: Any) -> Any:
        return Failure(v) if v is None else Success([v])

    assert and_then(Success(x), step) == step(x)
    assert and_then(Failure(x), probe) == Failure(x)


@given(payloads, payloads)
@settings(deadline=None, derandomize=True)
def test_unwrap_or_law(x: Any, d: Any) -> None:
    assert unwrap_or(Success(x), d) == x
    assert unwrap_or(Failure(x), d) == d


@given(payloads)
@settings(deadline=None, derandomize=True)
def test_match_calls_one_branch(x: Any) -> None:
    assert match(Success(x), repr, probe) == repr(x)
    assert match(Failure(x), probe, repr) == repr(x)


@given(st.lists(results, max_size=8))
@settings(deadline=None, derandomize=True)
def test_combine_all_matches_first_failure_or_all_values(items: list[Any]) -> None:
    failures = [r for r in items if isinstance(r, Failure)]
    expected = failures[0] if failures else Success([r.value for r in items])
    assert combine_all(items) == expected


@given(st.lists(results, max_size=8))
@settings(deadline=None, derandomize=True)
def test_combine_all_errors_partitions_in_order(items: list[Any]) -> None:
    errors = [r.error for r in items if isinstance(r, Failure)]
    values = [r.value for r in items if isinstance(r, Success)]
    expected = failure(errors) if errors else Success(values)
    assert combine_all_errors(items) == expected


@given(results)
@settings(deadline=None, derandomize=True)
def test_plain_dict_round_trip(result: Any) -> None:
    assert from_dict(as_dict(result)) == result
