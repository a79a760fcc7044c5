"""Data models for dispatch tracing.

Records are storage-agnostic and serialize to plain JSON-compatible dicts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class DispatchRecord:
    """Record of a single message dispatch.

    Attributes:
        sequence: Completion order of this dispatch within its evaluator.
        receiver: Index of the receiving object.
        message: Message name that was sent.
        holder: Index of the object whose slot matched, None on a miss.
        depth: Breadth-first level of the match (0 = receiver's own slot).
        with_parameter: Whether the dispatch bound a parameter.
        result: Index of the produced object, None on a miss.

    Example:
        record = DispatchRecord(
            sequence=3,
            receiver=1021,
            message="increment",
            holder=1004,
            depth=1,
            with_parameter=True,
            result=1022,
        )
    """

    sequence: int
    receiver: int
    message: str
    holder: int | None = None
    depth: int | None = None
    with_parameter: bool = False
    result: int | None = None

    @property
    def found(self) -> bool:
        return self.holder is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "sequence": self.sequence,
            "receiver": self.receiver,
            "message": self.message,
            "holder": self.holder,
            "depth": self.depth,
            "with_parameter": self.with_parameter,
            "result": self.result,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DispatchRecord:
        """Create from dictionary (for deserialization)."""
        return cls(
            sequence=data["sequence"],
            receiver=data["receiver"],
            message=data["message"],
            holder=data.get("holder"),
            depth=data.get("depth"),
            with_parameter=data.get("with_parameter", False),
            result=data.get("result"),
        )
