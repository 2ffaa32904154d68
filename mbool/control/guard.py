"""
Guard combinators
=================

Комбинаторы guard / guarded: условие превращается в успех или пустое значение.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import LazyCoroResult, Option

from .._helpers import (
    bind_list,
    bind_then,
    empty_list,
    empty_option,
    fail_lazy,
    pure_lazy,
    pure_list,
    pure_option,
)
from .._types import Bind, Predicate, Pure, Thunk
from .conditional import ifM


# ============================================================================
# Generic combinators (bind + pure + empty pattern)
# ============================================================================


def guardM[MB, MU](
    cond: MB,
    *,
    bind: Bind[MB, MU],
    pure: Pure[None, MU],
    empty: Thunk[MU],
) -> MU:
    """
    Generic monadic guard.

    True becomes pure(None), False becomes empty(). Failure of cond
    itself propagates through bind without looking at the boolean.

    Args:
        cond: Context holding a bool
        bind: Sequencing capability of the context
        pure: Neutral success constructor
        empty: Failure constructor (thunk, built only when needed)
    """
    return ifM(cond, lambda: pure(None), empty, bind=bind)


def guardedM[T, F](
    predicate: Predicate[T],
    value: T,
    *,
    pure: Pure[T, F],
    empty: Thunk[F],
) -> F:
    """
    Generic guarded.

    Lift value into the context if it passes predicate, else empty().
    No sequencing involved, only pure and empty are needed.
    """
    return pure(value) if predicate(value) else empty()


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def guard[E](
    cond: LazyCoroResult[bool, E],
    *,
    error: Callable[[], E],
) -> LazyCoroResult[None, E]:
    """
    Ok(None) if cond yields True, Error(error()) if False.

    NOTE: error is a thunk, the error value is built only when the guard fails.
    """
    return guardM(
        cond,
        bind=bind_then,
        pure=pure_lazy,
        empty=lambda: fail_lazy(error()),
    )


def guarded[T, E](
    predicate: Predicate[T],
    value: T,
    *,
    error: Callable[[T], E],
) -> LazyCoroResult[T, E]:
    """
    Ok(value) if value passes predicate, else Error(error(value)).

    Example:
        guarded(str.isdigit, "42", error=lambda s: f"not a number: {s}")
    """
    return guardedM(
        predicate,
        value,
        pure=pure_lazy,
        empty=lambda: fail_lazy(error(value)),
    )


# ============================================================================
# Sugar for Option
# ============================================================================


def guard_opt(cond: Option[bool]) -> Option[None]:
    """
    Option guard.

    Example:
        guard_opt(Some(True))   # Some(None)
        guard_opt(Some(False))  # Nothing()
        guard_opt(Nothing())    # Nothing()
    """
    return guardM(cond, bind=bind_then, pure=pure_option, empty=empty_option)


def guarded_opt[T](predicate: Predicate[T], value: T) -> Option[T]:
    """
    Some(value) if value passes predicate, else Nothing().

    Handy for smart constructors:
        guarded_opt(bool, host).map(Host)
    """
    return guardedM(predicate, value, pure=pure_option, empty=empty_option)


# ============================================================================
# Sugar for list
# ============================================================================


def guard_list(cond: list[bool]) -> list[None]:
    """List guard: [None] per True element, nothing per False one."""
    return guardM(cond, bind=bind_list, pure=pure_list, empty=empty_list)


def guarded_list[T](predicate: Predicate[T], value: T) -> list[T]:
    """
    [value] if value passes predicate, else [].

    Example:
        guarded_list(lambda n: n % 2 == 0, 2)  # [2]
        guarded_list(lambda n: n % 2 == 0, 3)  # []
    """
    return guardedM(predicate, value, pure=pure_list, empty=empty_list)


__all__ = (
    "guard",
    "guarded",
    "guard_opt",
    "guarded_opt",
    "guard_list",
    "guarded_list",
    "guardM",
    "guardedM",
)
