"""Post use cases."""

from .get_home import GetHomeRequest, GetHomeResponse, GetHomeUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .manage_posts import (
    AdminPostResponse,
    DeletePostRequest,
    DeletePostUseCase,
    GetAdminPostRequest,
    GetAdminPostResponse,
    GetAdminPostUseCase,
    ListAdminPostsResponse,
    ListAdminPostsUseCase,
    SavePostRequest,
    SavePostUseCase,
)

__all__ = [
    "AdminPostResponse",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetAdminPostRequest",
    "GetAdminPostResponse",
    "GetAdminPostUseCase",
    "GetHomeRequest",
    "GetHomeResponse",
    "GetHomeUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "ListAdminPostsResponse",
    "ListAdminPostsUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "SavePostRequest",
    "SavePostUseCase",
]
