"""Boolean combinators

Short-circuiting monadic && and ||. The right operand is a deferred
computation and is forced only when the left one does not decide the result."""

from __future__ import annotations

from kungfu import LazyCoroResult, Option

from .._helpers import bind_list, bind_then, pure_lazy, pure_list, pure_option
from .._types import Bind, Pure, Thunk
from ..control.conditional import ifM

# Generic combinators (bind + pure pattern)
def andM[MB](
    lhs: MB,
    rhs: Thunk[MB],
    *,
    bind: Bind[MB, MB],
    pure: Pure[bool, MB],
) -> MB:
    """
    Generic monadic AND (`&&^`).

    False on the left returns pure(False), rhs is never forced.
    Failure on the left propagates, rhs is never forced.
    """
    return ifM(lhs, rhs, lambda: pure(False), bind=bind)

def orM[MB](
    lhs: MB,
    rhs: Thunk[MB],
    *,
    bind: Bind[MB, MB],
    pure: Pure[bool, MB],
) -> MB:
    """
    Generic monadic OR (`||^`).

    True on the left returns pure(True), rhs is never forced.
    Failure on the left propagates, rhs is never forced.
    """
    return ifM(lhs, lambda: pure(True), rhs, bind=bind)

# Sugar for LazyCoroResult
def and_[E](
    lhs: LazyCoroResult[bool, E],
    rhs: LazyCoroResult[bool, E],
) -> LazyCoroResult[bool, E]:
    """
    Await lhs; await rhs only if lhs yields True.

    Example:
        is_admin = LazyCoroResult(lambda: check_admin(user))
        can_edit = LazyCoroResult(lambda: check_owner(user, doc))
        allowed = and_(is_admin, can_edit)  # check_owner runs only for admins
    """
    return andM(lhs, lambda: rhs, bind=bind_then, pure=pure_lazy)

def or_[E](
    lhs: LazyCoroResult[bool, E],
    rhs: LazyCoroResult[bool, E],
) -> LazyCoroResult[bool, E]:
    """Await lhs; await rhs only if lhs yields False."""
    return orM(lhs, lambda: rhs, bind=bind_then, pure=pure_lazy)

# Sugar for Option
def and_opt(lhs: Option[bool], rhs: Thunk[Option[bool]]) -> Option[bool]:
    """
    Option AND.

    Example:
        and_opt(Some(False), lambda: Some(True))  # Some(False)
        and_opt(Some(True), lambda: Nothing())    # Nothing()
        and_opt(Some(False), lambda: Nothing())   # Some(False)
    """
    return andM(lhs, rhs, bind=bind_then, pure=pure_option)

def or_opt(lhs: Option[bool], rhs: Thunk[Option[bool]]) -> Option[bool]:
    """
    Option OR.

    Example:
        or_opt(Some(False), lambda: Some(True))  # Some(True)
        or_opt(Some(True), lambda: Nothing())    # Some(True)
    """
    return orM(lhs, rhs, bind=bind_then, pure=pure_option)

# Sugar for list
def and_list(lhs: list[bool], rhs: Thunk[list[bool]]) -> list[bool]:
    """List AND: rhs is forced once per True on the left."""
    return andM(lhs, rhs, bind=bind_list, pure=pure_list)

def or_list(lhs: list[bool], rhs: Thunk[list[bool]]) -> list[bool]:
    """List OR: rhs is forced once per False on the left."""
    return orM(lhs, rhs, bind=bind_list, pure=pure_list)

__all__ = (
    "and_",
    "or_",
    "and_opt",
    "or_opt",
    "and_list",
    "or_list",
    "andM",
    "orM",
)
