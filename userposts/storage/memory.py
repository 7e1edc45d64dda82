import logging
import threading
from datetime import date
from typing import Iterable, List, Optional

from userposts.models.user import User
from userposts.storage.base import Repository, T

logger = logging.getLogger(__name__)


class InMemoryRepository(Repository[T]):
    """Ordered, process-local collection keyed by integer id.

    Entities are transient ORM instances, never attached to a session.
    ``save`` assigns ``counter + 1`` to entities without an id and appends;
    an explicitly supplied id is trusted and not checked for duplicates.
    Mutations hold a lock so concurrent requests cannot lose updates.
    """

    def __init__(self, entities: Iterable[T] = (), counter: Optional[int] = None):
        self._entities: List[T] = list(entities)
        if counter is None:
            counter = max((e.id for e in self._entities), default=0)
        self._counter = counter
        self._lock = threading.Lock()

    def find_all(self) -> List[T]:
        with self._lock:
            return list(self._entities)

    def find_by_id(self, id: int) -> Optional[T]:
        with self._lock:
            for entity in self._entities:
                if entity.id == id:
                    return entity
        return None

    def save(self, entity: T) -> T:
        with self._lock:
            if entity.id is None:
                self._counter += 1
                entity.id = self._counter
            self._entities.append(entity)
        logger.debug("stored %r", entity)
        return entity

    def delete_by_id(self, id: int) -> Optional[T]:
        with self._lock:
            for index, entity in enumerate(self._entities):
                if entity.id == id:
                    return self._entities.pop(index)
        return None


def seeded_user_repository() -> InMemoryRepository:
    today = date.today()
    users = [
        User(id=1, name="Adam", birth_date=today),
        User(id=2, name="Eve", birth_date=today),
        User(id=3, name="Jack", birth_date=today),
    ]
    return InMemoryRepository(users, counter=3)


def empty_post_repository() -> InMemoryRepository:
    return InMemoryRepository([], counter=0)
