"""Unit tests for Outcome."""

import pytest

from httpmanager.core import Failure, Success, catching
from httpmanager.core.exceptions import DecodingError


def test_success_map_and_flat_map():
    outcome = Success(2).map(lambda v: v * 10)
    assert outcome == Success(20)
    assert outcome.flat_map(lambda v: Failure(ValueError(v))).is_failure


def test_failure_short_circuits():
    error = ValueError("boom")
    outcome = Failure(error)
    assert outcome.map(lambda v: v + 1) is outcome
    assert outcome.flat_map(lambda v: Success(v)) is outcome
    assert outcome.value is None
    assert outcome.value_or("default") == "default"


def test_unwrap():
    assert Success("x").unwrap() == "x"
    with pytest.raises(ValueError, match="boom"):
        Failure(ValueError("boom")).unwrap()


def test_exactly_one_side():
    assert Success(None).is_success and not Success(None).is_failure
    assert Failure(ValueError()).is_failure and not Failure(ValueError()).is_success
    assert Success(1).error is None


def test_catching_wraps_errors():
    outcome = catching(lambda: int("nope"), DecodingError)
    assert isinstance(outcome.error, DecodingError)
    assert isinstance(outcome.error.cause, ValueError)
    assert catching(lambda: 5) == Success(5)


def test_catching_only_listed_exceptions():
    with pytest.raises(KeyError):
        catching(lambda: {}["missing"], exceptions=(ValueError,))
