from __future__ import annotations

from lawful import Log, Writer
from lawful.typeclasses import Applicative, Monad


def step(x: int) -> Writer[int, str]:
    return Writer(x + 1, [f"inc {x}"])


def test_pure_has_empty_log() -> None:
    assert Writer.pure(1).run() == (1, Log())


def test_map_preserves_log() -> None:
    assert Writer(1, ["a"]).map(str) == Writer("1", ["a"])


def test_ap_combines_receiver_first() -> None:
    result = Writer(2, ["value"]).ap(Writer(lambda x: x * 3, ["function"]))
    assert result == Writer(6, ["value", "function"])


def test_flat_map_combines_in_order() -> None:
    assert Writer(1, ["start"]).then(step).then(step) == Writer(3, ["start", "inc 1", "inc 2"])


def test_left_identity() -> None:
    assert Writer.pure(5).flat_map(step) == step(5)


def test_right_identity() -> None:
    w = Writer(5, ["x"])
    assert w.flat_map(Writer.pure) == w


def test_tell() -> None:
    assert Writer.tell("a", "b").run() == (None, ["a", "b"])


def test_with_log_listen_censor() -> None:
    w = Writer(1).with_log("one", "two")
    assert w.listen().value == (1, ["one", "two"])
    assert w.censor(lambda log: Log(e for e in log if e != "one")).log == ["two"]


def test_log_copy_is_isolated() -> None:
    w = Writer(1, ["a"])
    w.log.append("mutated")
    assert w.log == ["a"]


def test_match() -> None:
    match Writer(1, ["a"]):
        case Writer(value, log):
            assert (value, log) == (1, ["a"])


def test_capabilities() -> None:
    assert isinstance(Writer.pure(1), Applicative)
    assert isinstance(Writer.pure(1), Monad)
