from __future__ import annotations

import asyncio

import kungfu
import pytest

from lawful import Err, Ok, Result, from_kungfu


@pytest.mark.parametrize("r", [Ok(1), Err("e")])
def test_round_trip(r: Result[int, str]) -> None:
    assert from_kungfu(r.to_kungfu()) == r


def test_to_kungfu_variants() -> None:
    match Ok(1).to_kungfu():
        case kungfu.Ok(value):
            assert value == 1
        case _:
            pytest.fail("expected kungfu.Ok")
    match Err("e").to_kungfu():
        case kungfu.Error(error):
            assert error == "e"
        case _:
            pytest.fail("expected kungfu.Error")


@pytest.mark.parametrize("r", [Ok(2), Err("late")])
def test_to_async(r: Result[int, str]) -> None:
    async def run() -> kungfu.Result[int, str]:
        return await r.to_async()

    assert from_kungfu(asyncio.run(run())) == r
