"""Comment thread controller factory."""

from inkwell.application.controller import CommentThreadController
from inkwell.config import Settings
from inkwell.domain.service import ChangeFeed, CommentService, LikeService
from inkwell.domain.value import PostId, VisitorId


class CommentThreadFactory:
    """Builds a thread controller per visitor and post."""

    def __init__(
        self,
        comment_service: CommentService,
        like_service: LikeService,
        change_feed: ChangeFeed,
        settings: Settings,
    ) -> None:
        self.comment_service = comment_service
        self.like_service = like_service
        self.change_feed = change_feed
        self.settings = settings

    def create(self, post_id: PostId, visitor_id: VisitorId) -> CommentThreadController:
        return CommentThreadController(
            post_id=post_id,
            visitor_id=visitor_id,
            comment_service=self.comment_service,
            like_service=self.like_service,
            change_feed=self.change_feed,
            settings=self.settings.comments,
        )
