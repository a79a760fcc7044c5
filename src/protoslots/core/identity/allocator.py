"""Object ID allocation.

ObjectIdAllocator hands out handles for new and copied objects. Handles are
never recycled: the engine does not destroy objects, so there is no free list.
"""

from __future__ import annotations

from protoslots.core.identity.models import ObjectId


class ObjectIdAllocator:
    """Allocates monotonically increasing object IDs.

    Args:
        start: First index to hand out (default 1; index 0 is never allocated).
    """

    def __init__(self, start: int = 1):
        self._start = start
        self._next_index = start

    def allocate(self) -> ObjectId:
        """Allocate a new object ID.

        Returns:
            Newly allocated ObjectId.
        """
        index = self._next_index
        self._next_index += 1
        return ObjectId(index=index)

    @property
    def allocated(self) -> int:
        """Number of IDs handed out so far."""
        return self._next_index - self._start


_default_allocator = ObjectIdAllocator()


def allocate_object_id() -> ObjectId:
    """Allocate an ID from the process-wide allocator."""
    return _default_allocator.allocate()
