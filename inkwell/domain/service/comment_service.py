"""Comment domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from inkwell.config import CommentSettings
from inkwell.domain.error import NotFoundError, ValidationError
from inkwell.domain.model.comment import Comment
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import CommentId, PostId, is_valid_email

from .base import Service

ADMIN_AUTHOR_NAME = "Admin"
ADMIN_AUTHOR_EMAIL = "admin@inkwell.blog"


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            settings: Comment length limits
        """
        self.comment_repository = comment_repository
        self.settings = settings

    def validate_submission(
        self, author_name: str, author_email: str, content: str
    ) -> tuple[str, str, str]:
        """Check a reader submission without touching the backend.

        Args:
            author_name: Display name as typed
            author_email: Email as typed
            content: Comment body as typed

        Returns:
            Trimmed (name, email, content)

        Raises:
            ValidationError: On the first field that is empty, too long or
                malformed
        """
        name = author_name.strip()
        email = author_email.strip()
        body = content.strip()

        if not name:
            raise ValidationError("Please enter your name", field="author_name")
        if len(name) > self.settings.max_name_length:
            raise ValidationError(
                f"Name must be at most {self.settings.max_name_length} characters",
                field="author_name",
            )
        if not email:
            raise ValidationError("Please enter your email", field="author_email")
        if len(email) > self.settings.max_email_length or not is_valid_email(email):
            raise ValidationError(
                "Please enter a valid email address", field="author_email"
            )
        if not body:
            raise ValidationError("Please enter a comment", field="content")
        if len(body) > self.settings.max_body_length:
            raise ValidationError(
                f"Comment must be at most {self.settings.max_body_length} characters",
                field="content",
            )
        return name, email, body

    async def create_comment(
        self,
        post_id: PostId,
        author_name: str,
        author_email: str,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a reader comment or reply.

        Args:
            post_id: Post ID
            author_name: Display name
            author_email: Contact email, never shown publicly
            content: Comment body
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If any field is invalid (no backend call made)
            NotFoundError: If the parent comment does not exist
        """
        name, email, body = self.validate_submission(author_name, author_email, content)

        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                    )
                    raise NotFoundError("Comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment does not belong to post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                        target_post_id=str(post_id),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this post",
                        field="parent_id",
                    )

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                parent_id=parent_id,
                author_name=name,
                author_email=email,
                content=body,
                is_admin_reply=False,
                likes_count=0,
                created_at=datetime.now(timezone.utc),
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                is_reply=saved.is_reply,
            )
            return saved

    async def create_admin_reply(self, parent_id: CommentId, content: str) -> Comment:
        """Reply to a comment as the site operator.

        Args:
            parent_id: Comment being replied to
            content: Reply body

        Returns:
            Created reply, flagged ``is_admin_reply``

        Raises:
            ValidationError: If the reply is empty or too long
            NotFoundError: If the parent comment does not exist
        """
        body = content.strip()
        if not body:
            raise ValidationError("Please enter a reply", field="content")
        if len(body) > self.settings.max_body_length:
            raise ValidationError(
                f"Reply must be at most {self.settings.max_body_length} characters",
                field="content",
            )

        with logfire.span("comment_service.create_admin_reply", parent_id=str(parent_id)):
            parent = await self.comment_repository.find_by_id(parent_id)
            if not parent:
                logfire.warn("Admin reply to missing comment", parent_id=str(parent_id))
                raise NotFoundError("Comment", str(parent_id))

            reply = Comment(
                id=CommentId(uuid4()),
                post_id=parent.post_id,
                parent_id=parent_id,
                author_name=ADMIN_AUTHOR_NAME,
                author_email=ADMIN_AUTHOR_EMAIL,
                content=body,
                is_admin_reply=True,
                likes_count=0,
                created_at=datetime.now(timezone.utc),
            )
            saved = await self.comment_repository.save(reply)
            logfire.info(
                "Admin reply created",
                comment_id=str(saved.id),
                parent_id=str(parent_id),
                post_id=str(parent.post_id),
            )
            return saved

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments for a post, oldest first.

        Args:
            post_id: Post ID

        Returns:
            Flat list ordered by ``created_at`` ascending
        """
        with logfire.span("comment_service.get_comments_for_post", post_id=str(post_id)):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post", post_id=str(post_id), count=len(comments)
            )
            return comments

    async def get_all_comments(self) -> list[Comment]:
        """Get every comment on the site, oldest first."""
        with logfire.span("comment_service.get_all_comments"):
            comments = await self.comment_repository.find_all()
            logfire.info("All comments retrieved", count=len(comments))
            return comments

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.get_comment_by_id", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment and its reply subtree.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                raise NotFoundError("Comment", str(comment_id))
            await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                post_id=str(comment.post_id),
            )
