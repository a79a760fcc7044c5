"""Object identity models.

Usage:
    oid = ObjectId(index=7)
    assert oid in visited
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ObjectId:
    """Stable handle for a slot object.

    Every constructed object and every copy receives a fresh index, so two
    handles compare equal only when they name the same node in the graph.
    """

    index: int = 0

    def __hash__(self) -> int:
        return hash(self.index)

    def __str__(self) -> str:
        return f"#{self.index}"
