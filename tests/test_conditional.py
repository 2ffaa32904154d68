from kungfu import Error, LazyCoroResult, Nothing, Ok, Some
from mbool import (
    if_,
    if_list,
    if_opt,
    unless,
    unless_list,
    unless_opt,
    when,
    when_list,
    when_opt,
)
from pytest import raises

from tests.utils import exploding, failing, never, recorded


async def test_when_true_runs_action() -> None:
    calls: list[str] = []
    result = await when(recorded(calls, "cond", True), recorded(calls, "action", None))

    assert result == Ok(None)
    assert calls == ["cond", "action"]


async def test_when_false_skips_action() -> None:
    calls: list[str] = []
    result = await when(recorded(calls, "cond", False), recorded(calls, "action", None))

    assert result == Ok(None)
    assert calls == ["cond"]


async def test_when_returns_action_result() -> None:
    action: LazyCoroResult[None, str] = Error("disk full").to_async()

    assert await when(LazyCoroResult.pure(True), action) == Error("disk full")


async def test_when_is_lazy_until_awaited() -> None:
    calls: list[str] = []
    pipeline = when(recorded(calls, "cond", True), recorded(calls, "action", None))

    assert calls == []
    await pipeline
    assert calls == ["cond", "action"]


async def test_when_failed_condition_propagates() -> None:
    calls: list[str] = []
    result = await when(failing(calls, "cond", "boom"), recorded(calls, "action", None))

    assert result == Error("boom")
    assert calls == ["cond"]


async def test_unless() -> None:
    calls: list[str] = []

    assert await unless(recorded(calls, "no", False), recorded(calls, "ran", None)) == Ok(None)
    assert await unless(recorded(calls, "yes", True), recorded(calls, "skipped", None)) == Ok(None)
    assert calls == ["no", "ran", "yes"]


async def test_if_selects_exactly_one_branch() -> None:
    calls: list[str] = []

    then_ = recorded(calls, "then", "True text")
    else_ = recorded(calls, "else", "False text")

    assert await if_(LazyCoroResult.pure(True), then_, else_) == Ok("True text")
    assert await if_(LazyCoroResult.pure(False), then_, else_) == Ok("False text")
    assert calls == ["then", "else"]


async def test_if_unchosen_branch_is_never_awaited() -> None:
    assert await if_(LazyCoroResult.pure(True), LazyCoroResult.pure(1), exploding()) == Ok(1)


async def test_if_forced_branch_exception_propagates() -> None:
    with raises(AssertionError, match="Shouldn't be evaluated"):
        await if_(LazyCoroResult.pure(True), exploding(), LazyCoroResult.pure(False))


def test_when_opt() -> None:
    assert when_opt(Some(True), lambda: Some(None)) == Some(None)
    assert when_opt(Some(False), never) == Some(None)
    assert when_opt(Nothing(), never) == Nothing()


def test_when_opt_returns_action_result() -> None:
    assert when_opt(Some(True), lambda: Nothing()) == Nothing()


def test_unless_opt() -> None:
    assert unless_opt(Some(False), lambda: Nothing()) == Nothing()
    assert unless_opt(Some(True), never) == Some(None)
    assert unless_opt(Nothing(), never) == Nothing()


def test_if_opt() -> None:
    assert if_opt(Some(True), lambda: Some("x"), never) == Some("x")
    assert if_opt(Some(False), never, lambda: Some("y")) == Some("y")
    assert if_opt(Nothing(), never, never) == Nothing()


def test_when_list() -> None:
    calls: list[str] = []

    def action() -> list[None]:
        calls.append("action")
        return [None]

    assert when_list([True], action) == [None]
    assert when_list([False], never) == [None]
    assert when_list([], never) == []
    assert calls == ["action"]


def test_when_list_runs_branch_per_element() -> None:
    calls: list[str] = []

    def action() -> list[None]:
        calls.append("action")
        return [None]

    assert when_list([True, False, True], action) == [None, None, None]
    assert calls == ["action", "action"]


def test_unless_list() -> None:
    assert unless_list([False], lambda: []) == []
    assert unless_list([True], never) == [None]


def test_if_list() -> None:
    assert if_list([True, False], lambda: [1, 2], lambda: [3]) == [1, 2, 3]
    assert if_list([], never, never) == []
