

from .boolean import (
    and_,
    and_list,
    and_opt,
    andM,
    or_,
    or_list,
    or_opt,
    orM,
)

__all__ = (
    # LazyCoroResult
    "and_",
    "or_",
    # Option
    "and_opt",
    "or_opt",
    # list
    "and_list",
    "or_list",
    # Generic
    "andM",
    "orM",
)
