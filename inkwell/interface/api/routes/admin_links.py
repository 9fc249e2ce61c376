"""Admin link shortener routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from inkwell.application.usecase.link import (
    CreateLinkRequest,
    CreateLinkUseCase,
    DeleteLinkRequest,
    DeleteLinkUseCase,
    LinkResponse,
    ListLinksResponse,
    ListLinksUseCase,
    UpdateLinkRequest,
    UpdateLinkUseCase,
)
from inkwell.interface.api.dependencies import require_admin

router = APIRouter(
    prefix="/admin/links",
    tags=["admin"],
    route_class=DishkaRoute,
    dependencies=[Depends(require_admin)],
)


class UpdateLinkAPIRequest(BaseModel):
    link_name: str
    original_url: str


@router.get("", response_model=ListLinksResponse)
async def list_links(
    list_links_use_case: FromDishka[ListLinksUseCase],
) -> ListLinksResponse:
    return await list_links_use_case.execute()


@router.post("", response_model=LinkResponse, status_code=status.HTTP_201_CREATED)
async def create_link(
    request: CreateLinkRequest,
    create_link_use_case: FromDishka[CreateLinkUseCase],
) -> LinkResponse:
    """Create a shortened link hosted on a random published post.

    409 when there is no published post, or when the alias is taken.
    """
    return await create_link_use_case.execute(request)


@router.put("/{link_id}", response_model=LinkResponse)
async def update_link(
    link_id: str,
    request: UpdateLinkAPIRequest,
    update_link_use_case: FromDishka[UpdateLinkUseCase],
) -> LinkResponse:
    return await update_link_use_case.execute(
        UpdateLinkRequest(
            link_id=link_id,
            link_name=request.link_name,
            original_url=request.original_url,
        )
    )


@router.delete("/{link_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_link(
    link_id: str,
    delete_link_use_case: FromDishka[DeleteLinkUseCase],
) -> None:
    await delete_link_use_case.execute(DeleteLinkRequest(link_id=link_id))
