"""
Monadic boolean combinators.

Conditional execution lifted into an effect context: when / unless / if,
guard / guarded and short-circuiting and / or.

Architecture:
- Generic combinators (*M functions) work with any context via bind + pure (+ empty) pattern
- Sugar functions for LazyCoroResult (no suffix)
- Sugar functions for Option (*_opt suffix)
- Sugar functions for list (*_list suffix)
"""

# Core types
from ._types import LCR, Bind, Predicate, Pure, Thunk

# Internal helpers (for custom contexts)
from . import _helpers

# Control flow
from .control import (
    # LazyCoroResult
    guard,
    guarded,
    if_,
    unless,
    when,
    # Option
    guard_opt,
    guarded_opt,
    if_opt,
    unless_opt,
    when_opt,
    # list
    guard_list,
    guarded_list,
    if_list,
    unless_list,
    when_list,
    # Generic
    guardedM,
    guardM,
    ifM,
    unlessM,
    whenM,
)

# Boolean logic
from .logic import (
    # LazyCoroResult
    and_,
    or_,
    # Option
    and_opt,
    or_opt,
    # list
    and_list,
    or_list,
    # Generic
    andM,
    orM,
)

__all__ = (
    # Types
    "LCR",
    "Bind",
    "Predicate",
    "Pure",
    "Thunk",
    # Internal helpers (for custom contexts)
    "_helpers",
    # Control - LazyCoroResult
    "guard",
    "guarded",
    "if_",
    "unless",
    "when",
    # Control - Option
    "guard_opt",
    "guarded_opt",
    "if_opt",
    "unless_opt",
    "when_opt",
    # Control - list
    "guard_list",
    "guarded_list",
    "if_list",
    "unless_list",
    "when_list",
    # Control - Generic
    "guardedM",
    "guardM",
    "ifM",
    "unlessM",
    "whenM",
    # Logic - LazyCoroResult
    "and_",
    "or_",
    # Logic - Option
    "and_opt",
    "or_opt",
    # Logic - list
    "and_list",
    "or_list",
    # Logic - Generic
    "andM",
    "orM",
)
