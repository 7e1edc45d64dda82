import abc
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Repository(abc.ABC, Generic[T]):
    """CRUD contract over one entity type, independent of the backing medium."""

    @abc.abstractmethod
    def find_all(self) -> List[T]:
        pass

    @abc.abstractmethod
    def find_by_id(self, id: int) -> Optional[T]:
        pass

    @abc.abstractmethod
    def save(self, entity: T) -> T:
        pass

    @abc.abstractmethod
    def delete_by_id(self, id: int) -> Optional[T]:
        pass
