import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from userposts.api.dependencies import get_post_store, get_user_store
from userposts.api.links import link_to, location_of
from userposts.api.schemas.schemas import PostCreate, PostResponse, UserCreate, UserModel, UserResponse
from userposts.api.validation import ensure_valid_user
from userposts.core.exceptions import NotFound
from userposts.models.post import Post
from userposts.models.user import User
from userposts.storage.memory import InMemoryRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Users"])


@router.get("/users", response_model=List[UserResponse], name="retrieve_all_users")
def retrieve_all_users(users: InMemoryRepository = Depends(get_user_store)):
    return users.find_all()


@router.get("/users/{id}", response_model=UserModel, name="retrieve_user")
def retrieve_user(id: int, request: Request, users: InMemoryRepository = Depends(get_user_store)):
    user = users.find_by_id(id)
    if user is None:
        raise NotFound(f"id-{id}")
    return UserModel(
        id=user.id,
        name=user.name,
        birth_date=user.birth_date,
        links=link_to(request, "retrieve_all_users", "all-users"),
    )


@router.post("/users", status_code=status.HTTP_201_CREATED, response_class=Response, name="create_user")
def create_user(user: UserCreate, request: Request, users: InMemoryRepository = Depends(get_user_store)):
    ensure_valid_user(user)
    saved = users.save(User(id=user.id, name=user.name, birth_date=user.birth_date))
    logger.info("created user %s", saved.id)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": location_of(request, "retrieve_user", id=saved.id)},
    )


@router.delete("/users/{id}", response_class=Response, name="delete_user")
def delete_user(id: int, users: InMemoryRepository = Depends(get_user_store)):
    if users.delete_by_id(id) is None:
        raise NotFound(f"id-{id}")
    logger.info("deleted user %s", id)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/users/{id}/posts", response_model=List[PostResponse], name="retrieve_all_posts")
def retrieve_all_posts(id: int, users: InMemoryRepository = Depends(get_user_store)):
    user = users.find_by_id(id)
    if user is None:
        raise NotFound(f"id {id}")
    return list(user.posts)


@router.post("/users/{id}/posts", status_code=status.HTTP_201_CREATED, response_class=Response, name="create_post")
def create_post(
    id: int,
    post: PostCreate,
    request: Request,
    users: InMemoryRepository = Depends(get_user_store),
    posts: InMemoryRepository = Depends(get_post_store),
):
    user = users.find_by_id(id)
    if user is None:
        raise NotFound(f"id {id}")
    saved = posts.save(Post(id=post.id, description=post.description, user=user))
    logger.info("created post %s for user %s", saved.id, id)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": location_of(request, "retrieve_post", id=saved.id)},
    )


@router.get("/posts/{id}", response_model=PostResponse, name="retrieve_post")
def retrieve_post(id: int, posts: InMemoryRepository = Depends(get_post_store)):
    post = posts.find_by_id(id)
    if post is None:
        raise NotFound(f"id-{id}")
    return post
