from fastapi import Depends, Request
from sqlalchemy.orm import Session

from userposts.core.database import get_db
from userposts.storage.memory import InMemoryRepository
from userposts.storage.sql import PostRepository, UserRepository


def get_user_store(request: Request) -> InMemoryRepository:
    return request.app.state.user_store


def get_post_store(request: Request) -> InMemoryRepository:
    return request.app.state.post_store


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_post_repository(db: Session = Depends(get_db)) -> PostRepository:
    return PostRepository(db)
