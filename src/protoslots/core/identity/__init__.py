"""Object identity functionality: stable handles and their allocation."""

from protoslots.core.identity.allocator import ObjectIdAllocator, allocate_object_id
from protoslots.core.identity.models import ObjectId

__all__ = [
    "ObjectId",
    "ObjectIdAllocator",
    "allocate_object_id",
]
