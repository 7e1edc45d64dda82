import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from userposts.api.dependencies import get_user_repository
from userposts.api.links import link_to, location_of
from userposts.api.schemas.schemas import UserCreate, UserModel, UserResponse
from userposts.api.validation import ensure_valid_user
from userposts.core.exceptions import NotFound
from userposts.models.user import User
from userposts.storage.sql import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jpa", tags=["Users (database)"])


@router.get("/users", response_model=List[UserResponse], name="jpa_retrieve_all_users")
def retrieve_all_users(users: UserRepository = Depends(get_user_repository)):
    return users.find_all()


@router.get("/users/{id}", response_model=UserModel, name="jpa_retrieve_user")
def retrieve_user(id: int, request: Request, users: UserRepository = Depends(get_user_repository)):
    user = users.find_by_id(id)
    if user is None:
        raise NotFound(f"id-{id}")
    return UserModel(
        id=user.id,
        name=user.name,
        birth_date=user.birth_date,
        links=link_to(request, "jpa_retrieve_all_users", "all-users"),
    )


@router.post("/users", status_code=status.HTTP_201_CREATED, response_class=Response, name="jpa_create_user")
def create_user(user: UserCreate, request: Request, users: UserRepository = Depends(get_user_repository)):
    ensure_valid_user(user)
    saved = users.save(User(id=user.id, name=user.name, birth_date=user.birth_date))
    logger.info("created user %s", saved.id)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": location_of(request, "jpa_retrieve_user", id=saved.id)},
    )


# absent ids are not reported; see DESIGN.md
@router.delete("/users/{id}", response_class=Response, name="jpa_delete_user")
def delete_user(id: int, users: UserRepository = Depends(get_user_repository)):
    users.delete_by_id(id)
    logger.info("deleted user %s", id)
    return Response(status_code=status.HTTP_200_OK)
