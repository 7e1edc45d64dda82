import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from userposts.api.dependencies import get_post_repository, get_user_repository
from userposts.api.links import location_of
from userposts.api.schemas.schemas import PostCreate, PostResponse
from userposts.core.exceptions import NotFound
from userposts.models.post import Post
from userposts.storage.sql import PostRepository, UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jpa", tags=["Posts (database)"])


@router.get("/users/{id}/posts", response_model=List[PostResponse], name="jpa_retrieve_all_posts")
def retrieve_all_posts(id: int, users: UserRepository = Depends(get_user_repository)):
    user = users.find_by_id(id)
    if user is None:
        raise NotFound(f"id {id}")
    return list(user.posts)


@router.post("/users/{id}/posts", status_code=status.HTTP_201_CREATED, response_class=Response, name="jpa_create_post")
def create_post(
    id: int,
    post: PostCreate,
    request: Request,
    users: UserRepository = Depends(get_user_repository),
    posts: PostRepository = Depends(get_post_repository),
):
    user = users.find_by_id(id)
    if user is None:
        raise NotFound(f"id {id}")
    saved = posts.save(Post(id=post.id, description=post.description, user=user))
    logger.info("created post %s for user %s", saved.id, id)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": location_of(request, "jpa_retrieve_post", id=saved.id)},
    )


@router.get("/posts/{id}", response_model=PostResponse, name="jpa_retrieve_post")
def retrieve_post(id: int, posts: PostRepository = Depends(get_post_repository)):
    post = posts.find_by_id(id)
    if post is None:
        raise NotFound(f"id-{id}")
    return post
