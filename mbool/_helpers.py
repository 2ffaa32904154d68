"""Internal helpers for mbool.

Capabilities (bind / pure / empty) of the built-in contexts.
These are not part of the public API but can be used for plugging
custom contexts into the generic *M combinators."""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Error, LazyCoroResult, Nothing, Option, Some

# Bind functions (M[bool] -> (bool -> M[A]) -> M[A])
def bind_then[A](m: typing.Any, f: Callable[[bool], A]) -> A:
    """
    Sequence any kungfu value through its `.then`.

    Works for Option, Result and LazyCoroResult: `Some`/`Ok` feed the value
    into `f`, `Nothing`/`Error` short-circuit and `f` is never called.
    For LazyCoroResult `f` returns another LazyCoroResult, which is awaitable,
    so it satisfies `.then`'s `T -> Awaitable[Result]` contract.
    """
    return m.then(f)

def bind_list[T, A](m: list[T], f: Callable[[T], list[A]]) -> list[A]:
    """
    List monad bind: apply `f` to every element and concatenate.

    An empty list short-circuits: `f` is never called.
    """
    return [b for a in m for b in f(a)]

# Pure functions (A -> M[A])
def pure_option[T](value: T) -> Option[T]:
    """Lift value into Some."""
    return Some(value)

def pure_list[T](value: T) -> list[T]:
    """Lift value into a singleton list."""
    return [value]

def pure_lazy[T](value: T) -> LazyCoroResult[T, typing.Any]:
    """Lift value into an always-succeeding LazyCoroResult."""
    return LazyCoroResult.pure(value)

# Empty functions (() -> M[A])
def empty_option() -> Option[typing.Any]:
    """Nothing - the Option failure value."""
    return Nothing()

def empty_list() -> list[typing.Any]:
    """[] - the list failure value."""
    return []

def fail_lazy[E](error: E) -> LazyCoroResult[typing.Any, E]:
    """
    Always-failing LazyCoroResult.

    NOTE: LazyCoroResult has no intrinsic empty value, so the failure
          carries a caller-supplied error.
    """
    return Error(error).to_async()

__all__ = (
    # Bind functions
    "bind_then",
    "bind_list",
    # Pure functions
    "pure_option",
    "pure_list",
    "pure_lazy",
    # Empty functions
    "empty_option",
    "empty_list",
    "fail_lazy",
)
