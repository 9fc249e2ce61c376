"""Reader post routes."""

from typing import Literal

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from inkwell.application.usecase.post import (
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
)
from inkwell.domain.error import NotFoundError
from inkwell.domain.value import PostCardVariant

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    q: str | None = None,
    category: str | None = None,
    sort: Literal["latest", "oldest"] = "latest",
    page: int = Query(default=1, ge=1),
    variant: PostCardVariant = PostCardVariant.FULL,
) -> ListPostsResponse:
    """List published posts, nine per page.

    Args:
        list_posts_use_case: List posts use case from DI
        q: Search text matched against title and excerpt
        category: Category slug to filter by
        sort: ``latest`` or ``oldest`` by publication date
        page: 1-based page number
        variant: Post card variant

    Returns:
        Page of post cards with the total count
    """
    return await list_posts_use_case.execute(
        ListPostsRequest(
            search=q, category=category, sort=sort, page=page, variant=variant
        )
    )


@router.get("/{slug}", response_model=GetPostResponse)
async def get_post(
    slug: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Get a published post by slug.

    ``/posts/hello-world.html`` and ``/posts/hello-world`` are the same post.

    Raises:
        HTTPException: 404 if no published post has that slug
    """
    try:
        return await get_post_use_case.execute(GetPostRequest(slug=slug))
    except (NotFoundError, ValueError) as e:
        logfire.info("Post lookup failed", slug=slug, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
