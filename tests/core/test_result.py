# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: ordertaking
"""Tests for the Result container and its fail-fast combinators."""

import pytest

from ordertaking.core.result import Failure, Result, Success, sequence


def test_success_and_failure():
    s = Success(123)
    f = Failure(ValueError("fail"))
    assert s.is_success
    assert not s.is_failure
    assert s.value == 123
    assert s.error is None
    assert f.is_failure
    assert not f.is_success
    assert f.value is None
    assert str(f.error) == "fail"


def test_map_and_map_error():
    assert Success(2).map(lambda x: x * 3).unwrap() == 6
    f = Failure(ValueError("fail"))
    assert f.map(lambda x: x * 3) is f

    mapped = f.map_error(lambda e: KeyError(str(e)))
    assert isinstance(mapped.error, KeyError)
    s = Success(1)
    assert s.map_error(lambda e: KeyError(str(e))) is s


def test_flat_map_short_circuits():
    calls = []

    def half(x: int) -> Result[int, ValueError]:
        calls.append(x)
        if x % 2:
            return Failure(ValueError(f"{x} is odd"))
        return Success(x // 2)

    assert Success(8).flat_map(half).flat_map(half).unwrap() == 2
    calls.clear()
    r = Success(6).flat_map(half).flat_map(half).flat_map(half)
    assert r.is_failure
    assert str(r.error) == "3 is odd"
    assert calls == [6, 3]


def test_map_does_not_capture_exceptions():
    def boom(x: int) -> int:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        Success(1).map(boom)


def test_ensure():
    s = Success(42)
    assert s.ensure(lambda x: x > 0, ValueError("must be positive")).is_success
    r = s.ensure(lambda x: x < 0, ValueError("must be negative"))
    assert r.is_failure
    assert str(r.error) == "must be negative"

    f = Failure(ValueError("fail"))
    assert f.ensure(lambda x: x > 0, ValueError("should not run")).error is f.error


def test_unwrap_variants():
    f = Failure(ValueError("fail"))
    with pytest.raises(RuntimeError) as exc_info:
        f.unwrap()
    assert exc_info.value.__cause__ is f.error
    assert f.unwrap_or(5) == 5
    assert f.unwrap_or_else(lambda e: len(str(e))) == 4
    assert Success(1).unwrap_or(5) == 1
    assert Success(1).unwrap_or_else(lambda e: 5) == 1


def test_on_success_and_on_failure():
    seen = []
    Success(1).on_success(seen.append).on_failure(seen.append)
    error = ValueError("fail")
    Failure(error).on_success(seen.append).on_failure(seen.append)
    assert seen == [1, error]


def test_to_dict():
    assert Success(1).to_dict() == {"status": "success", "data": 1}
    assert Failure(ValueError("fail")).to_dict() == {
        "status": "error",
        "error": {"message": "fail"},
    }


@pytest.mark.asyncio
async def test_flat_map_async():
    async def double(x: int) -> Result[int, Exception]:
        return Success(x * 2)

    assert (await Success(7).flat_map_async(double)).unwrap() == 14
    f = Failure(ValueError("fail"))
    assert (await f.flat_map_async(double)) is f


def test_sequence_collects_values_in_order():
    assert sequence([Success(1), Success(2), Success(3)]).unwrap() == [1, 2, 3]
    assert sequence([]).unwrap() == []


def test_sequence_stops_at_first_failure():
    evaluated = []

    def check(x: int) -> Result[int, ValueError]:
        evaluated.append(x)
        if x < 0:
            return Failure(ValueError(f"negative: {x}"))
        return Success(x)

    r = sequence(check(x) for x in [1, -2, -3, 4])
    assert r.is_failure
    assert str(r.error) == "negative: -2"
    assert evaluated == [1, -2]
