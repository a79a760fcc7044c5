"""Core type definitions for protoslots."""

from typing import TypeVar

from typing_extensions import TypeAliasType

T = TypeVar("T")

Copy = TypeAliasType("Copy", T, type_params=(T,))
"""Type alias indicating a value is a fresh shallow clone.

When you see `Copy[T]` in a return type, the returned object has its own
`slots`, `parents` and `messages` containers. Objects referenced from those
containers are still shared with the source, so mutating a referenced
sub-object is visible through both.
"""
