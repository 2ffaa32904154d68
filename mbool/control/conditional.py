"""
Conditional combinators
=======================

Монадические if / when / unless с bind + pure паттерном.
"""

from __future__ import annotations

from kungfu import LazyCoroResult, Option

from .._helpers import bind_list, bind_then, pure_lazy, pure_list, pure_option
from .._types import Bind, Pure, Thunk


# ============================================================================
# Generic combinators (bind + pure pattern)
# ============================================================================


def ifM[MB, MA](
    cond: MB,
    then: Thunk[MA],
    otherwise: Thunk[MA],
    *,
    bind: Bind[MB, MA],
) -> MA:
    """
    Generic monadic if-then-else.

    Sequence `cond`, then force exactly one branch. The other thunk is
    never called, so its effects never happen.

    Args:
        cond: Context holding a bool
        then: Branch forced when cond yields True
        otherwise: Branch forced when cond yields False
        bind: Sequencing capability of the context

    Example:
        from kungfu import Ok

        ifM(Ok(True), lambda: Ok("yes"), lambda: Ok("no"), bind=lambda m, f: m.then(f))
        # Ok("yes")
    """
    return bind(cond, lambda flag: then() if flag else otherwise())


def whenM[MB, MU](
    cond: MB,
    action: Thunk[MU],
    *,
    bind: Bind[MB, MU],
    pure: Pure[None, MU],
) -> MU:
    """
    Generic monadic `when`.

    Run action only when cond yields True, otherwise pure(None).
    """
    return ifM(cond, action, lambda: pure(None), bind=bind)


def unlessM[MB, MU](
    cond: MB,
    action: Thunk[MU],
    *,
    bind: Bind[MB, MU],
    pure: Pure[None, MU],
) -> MU:
    """
    Generic monadic `unless`. Reverse of whenM.

    Run action only when cond yields False, otherwise pure(None).
    """
    return ifM(cond, lambda: pure(None), action, bind=bind)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def if_[T, E](
    cond: LazyCoroResult[bool, E],
    then: LazyCoroResult[T, E],
    otherwise: LazyCoroResult[T, E],
) -> LazyCoroResult[T, E]:
    """
    Await cond, then await exactly one branch.

    Branches are already lazy, so they are taken as is: the unchosen one
    is never awaited.
    """
    return ifM(cond, lambda: then, lambda: otherwise, bind=bind_then)


def when[E](
    cond: LazyCoroResult[bool, E],
    action: LazyCoroResult[None, E],
) -> LazyCoroResult[None, E]:
    """Await action only when cond yields True."""
    return whenM(cond, lambda: action, bind=bind_then, pure=pure_lazy)


def unless[E](
    cond: LazyCoroResult[bool, E],
    action: LazyCoroResult[None, E],
) -> LazyCoroResult[None, E]:
    """Await action only when cond yields False."""
    return unlessM(cond, lambda: action, bind=bind_then, pure=pure_lazy)


# ============================================================================
# Sugar for Option
# ============================================================================


def if_opt[T](
    cond: Option[bool],
    then: Thunk[Option[T]],
    otherwise: Thunk[Option[T]],
) -> Option[T]:
    """
    Option if-then-else. Nothing in cond propagates, no branch is forced.

    Example:
        if_opt(Some(True), lambda: Some(1), lambda: Some(2))  # Some(1)
        if_opt(Nothing(), lambda: Some(1), lambda: Some(2))   # Nothing()
    """
    return ifM(cond, then, otherwise, bind=bind_then)


def when_opt(cond: Option[bool], action: Thunk[Option[None]]) -> Option[None]:
    """
    Option `when`.

    Example:
        when_opt(Some(True), lambda: Some(None))   # Some(None)
        when_opt(Some(False), lambda: Some(None))  # Some(None), action not forced
        when_opt(Nothing(), lambda: Some(None))    # Nothing()
    """
    return whenM(cond, action, bind=bind_then, pure=pure_option)


def unless_opt(cond: Option[bool], action: Thunk[Option[None]]) -> Option[None]:
    """Option `unless`."""
    return unlessM(cond, action, bind=bind_then, pure=pure_option)


# ============================================================================
# Sugar for list
# ============================================================================


def if_list[T](
    cond: list[bool],
    then: Thunk[list[T]],
    otherwise: Thunk[list[T]],
) -> list[T]:
    """
    List if-then-else: one branch per element of cond, concatenated.

    NOTE: A branch thunk may be forced several times, once per matching flag.
    """
    return ifM(cond, then, otherwise, bind=bind_list)


def when_list(cond: list[bool], action: Thunk[list[None]]) -> list[None]:
    """List `when`."""
    return whenM(cond, action, bind=bind_list, pure=pure_list)


def unless_list(cond: list[bool], action: Thunk[list[None]]) -> list[None]:
    """List `unless`."""
    return unlessM(cond, action, bind=bind_list, pure=pure_list)


__all__ = (
    "if_",
    "when",
    "unless",
    "if_opt",
    "when_opt",
    "unless_opt",
    "if_list",
    "when_list",
    "unless_list",
    "ifM",
    "whenM",
    "unlessM",
)
