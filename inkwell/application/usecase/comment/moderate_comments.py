"""Comment moderation use cases."""

from uuid import UUID

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.view import AdminCommentCard, admin_card
from inkwell.domain.model.comment import Comment
from inkwell.domain.service import (
    CommentNode,
    CommentService,
    PostService,
    build_comment_forest,
    walk_forest,
)
from inkwell.domain.value import CommentFilterType, CommentId

UNKNOWN_POST_TITLE = "Unknown Post"


class ListModerationRequest(BaseModel):
    """Moderation list request. Any filter switches to a flat list."""

    search: str | None = None
    post_id: str | None = None
    filter_type: CommentFilterType = CommentFilterType.ALL


class ModerationTotals(BaseModel):
    total: int
    comments: int  # Top-level reader comments
    replies: int
    likes: int


class ListModerationResponse(BaseModel):
    threaded: bool
    comments: list[AdminCommentCard]
    totals: ModerationTotals


class ListModerationUseCase(BaseUseCase):
    """All comments on the site for the moderation console.

    Without filters the comments come back as a forest, newest root first,
    replies nested. With a search, post or type filter they come back as a
    flat list of the matching comments in thread order.
    """

    def __init__(self, comment_service: CommentService, post_service: PostService) -> None:
        """Initialize moderation use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service, for titles
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: ListModerationRequest) -> ListModerationResponse:
        comments = await self.comment_service.get_all_comments()
        titles = {p.id: p.title for p in await self.post_service.list_all()}
        roots = list(reversed(build_comment_forest(comments)))

        def title_of(comment: Comment) -> str:
            return titles.get(comment.post_id, UNKNOWN_POST_TITLE)

        def to_card(node: CommentNode, depth: int) -> AdminCommentCard:
            return admin_card(
                node.comment,
                depth=depth,
                post_title=title_of(node.comment),
                replies=[to_card(child, depth + 1) for child in node.children],
            )

        search = (request.search or "").strip().lower()
        threaded = (
            not search
            and not request.post_id
            and request.filter_type == CommentFilterType.ALL
        )

        if threaded:
            cards = [to_card(root, 0) for root in roots]
        else:
            cards = [
                admin_card(node.comment, depth=depth, post_title=title_of(node.comment))
                for node, depth in walk_forest(roots)
                if self._matches(node.comment, title_of(node.comment), search, request)
            ]

        return ListModerationResponse(
            threaded=threaded,
            comments=cards,
            totals=ModerationTotals(
                total=len(comments),
                comments=sum(1 for c in comments if not c.parent_id and not c.is_admin_reply),
                replies=sum(1 for c in comments if c.parent_id),
                likes=sum(c.likes_count for c in comments),
            ),
        )

    @staticmethod
    def _matches(
        comment: Comment, post_title: str, search: str, request: ListModerationRequest
    ) -> bool:
        if search and not any(
            search in field.lower()
            for field in (
                comment.author_name,
                comment.author_email,
                comment.content,
                post_title,
            )
        ):
            return False
        if request.post_id and str(comment.post_id) != request.post_id:
            return False
        if request.filter_type == CommentFilterType.COMMENTS and comment.parent_id:
            return False
        if request.filter_type == CommentFilterType.REPLIES and not comment.parent_id:
            return False
        if request.filter_type == CommentFilterType.ADMIN and not comment.is_admin_reply:
            return False
        return True


class AdminReplyRequest(BaseModel):
    parent_id: str
    content: str


class AdminReplyUseCase(BaseUseCase):
    """Reply to a comment as the site operator."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: AdminReplyRequest) -> AdminCommentCard:
        reply = await self.comment_service.create_admin_reply(
            CommentId(UUID(request.parent_id)), request.content
        )
        return admin_card(reply, depth=0, post_title=None)


class DeleteCommentRequest(BaseModel):
    comment_id: str


class DeleteCommentUseCase(BaseUseCase):
    """Delete a comment and everything replying to it."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        await self.comment_service.delete_comment(CommentId(UUID(request.comment_id)))
