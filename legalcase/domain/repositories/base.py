"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import TypeVar, List, Optional, Any, Protocol

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic CRUD operations."""

    def get_by_id(self, id: int) -> Optional[T]:
        """Get a single entity by ID."""
        ...

    def list(self, skip: int = 0, limit: Optional[int] = None) -> List[T]:
        """List entities ordered by ID, optionally paginated."""
        ...

    def create(self, obj_in: Any) -> T:
        """Create a new entity."""
        ...

    def update(self, db_obj: T, obj_in: Any = None) -> T:
        """Apply ``obj_in`` (if any) to an existing entity and persist it."""
        ...

    def delete(self, id: int) -> int:
        """Delete an entity by ID. Returns the number of rows removed."""
        ...
