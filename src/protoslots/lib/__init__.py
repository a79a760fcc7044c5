"""Built-in native computations."""

from protoslots.lib.arithmetic import (
    OPERATORS,
    box,
    increment,
    install_arithmetic,
    install_operator,
    make_increment,
    make_operator,
)

__all__ = [
    "OPERATORS",
    "box",
    "increment",
    "make_increment",
    "make_operator",
    "install_operator",
    "install_arithmetic",
]
