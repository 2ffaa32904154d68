"""
Core type definitions for mbool.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import LazyCoroResult

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Thunk = deferred construction of a branch (forced only when selected)
type Thunk[M] = Callable[[], M]

# Bind = sequencing capability: run `m`, feed its boolean into continuation
# NOTE: MB is the context holding a bool, MA is the context the branch returns.
#       Python has no higher-kinded types, so both are spelled out.
type Bind[MB, MA] = Callable[[MB, Callable[[bool], MA]], MA]

# Pure = neutral success capability: lift a plain value into the context
type Pure[T, M] = Callable[[T], M]

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# LCR = LazyCoroResult shortcut
type LCR[T, E] = LazyCoroResult[T, E]

__all__ = (
    # Type aliases
    "Predicate",
    "Thunk",
    "Bind",
    "Pure",
    # Concrete shortcuts
    "LCR",
)
