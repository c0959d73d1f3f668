"""Persistence contract shared by the domain repositories.

Services are written against ``IRepository[T]`` and its per-entity
subclasses; only the concrete repositories touch the ORM.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """CRUD contract over entities of type ``T``.

    A malformed ID is treated like an ID that matches nothing.
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def exists(self, id: str) -> bool:
        """Tell whether an entity with this primary key is stored."""

    @abstractmethod
    def list(self) -> List[T]:
        """List every stored entity."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Remove an entity by ID."""
