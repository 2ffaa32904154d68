from .conditional import (
    if_,
    if_list,
    if_opt,
    ifM,
    unless,
    unless_list,
    unless_opt,
    unlessM,
    when,
    when_list,
    when_opt,
    whenM,
)
from .guard import (
    guard,
    guard_list,
    guard_opt,
    guarded,
    guarded_list,
    guarded_opt,
    guardedM,
    guardM,
)

__all__ = (
    # Conditional
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
    # Guard
    "guard",
    "guarded",
    "guard_opt",
    "guarded_opt",
    "guard_list",
    "guarded_list",
    "guardM",
    "guardedM",
)
