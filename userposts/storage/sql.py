import logging
from typing import List, Optional, Type

from sqlalchemy.orm import Session

from userposts.models.post import Post
from userposts.models.user import User
from userposts.storage.base import Repository, T

logger = logging.getLogger(__name__)


class SqlRepository(Repository[T]):
    """Table-backed repository bound to one session and one mapped class."""

    model: Type[T]

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[T]:
        return self.db.query(self.model).all()

    def find_by_id(self, id: int) -> Optional[T]:
        return self.db.get(self.model, id)

    def save(self, entity: T) -> T:
        if entity.id is None or self.db.get(self.model, entity.id) is None:
            self.db.add(entity)
        else:
            # upsert over the existing row
            entity = self.db.merge(entity)
        self.db.commit()
        self.db.refresh(entity)
        logger.debug("saved %r", entity)
        return entity

    def delete_by_id(self, id: int) -> None:
        # bulk delete so the ORM never nulls foreign keys pointing at the row;
        # deleting nothing is not an error
        deleted = self.db.query(self.model).filter(self.model.id == id).delete(synchronize_session=False)
        self.db.commit()
        logger.debug("deleted %d %s row(s) with id %s", deleted, self.model.__tablename__, id)
        return None


class UserRepository(SqlRepository[User]):
    model = User


class PostRepository(SqlRepository[Post]):
    model = Post
