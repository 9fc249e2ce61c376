"""Comment thread controller.

Owns the fetch, build, render and mutate cycle of one post's comment
thread for one visitor: a page view in the browser, an SSE connection
here.

Every change notification triggers a full refetch and rebuild. Refetches
are numbered; a refetch that finishes after a newer one has started is
thrown away so stale data never overwrites fresher data.
"""

import asyncio
from collections.abc import AsyncIterator

import logfire
from pydantic import BaseModel

from inkwell.adapter.error import BackendError
from inkwell.config import CommentSettings
from inkwell.domain.error import DomainError, NotFoundError, ValidationError
from inkwell.domain.model.comment import Comment
from inkwell.domain.service import (
    ChangeEvent,
    ChangeFeed,
    CommentNode,
    CommentService,
    LikeService,
    Subscription,
    build_comment_forest,
    count_nodes,
    walk_forest,
)
from inkwell.domain.value import CommentId, PostId, VisitorId
from inkwell.application.view.comment import PublicCommentCard, public_card

SUBMIT_FAILED = "Failed to post comment. Please try again."
PARENT_MISSING = "The comment you are replying to no longer exists."
LIKE_FAILED = "Failed to update like. Please try again."


class CommentDraft(BaseModel):
    """What the visitor has typed into the compose form."""

    author_name: str = ""
    author_email: str = ""
    content: str = ""


class SubmitResult(BaseModel):
    ok: bool
    draft: CommentDraft
    comment_id: str | None = None
    error: str | None = None
    field: str | None = None


class LikeResult(BaseModel):
    ok: bool
    comment_id: str
    liked: bool
    likes_count: int
    error: str | None = None


class ThreadView(BaseModel):
    """Rendered thread: visible cards in reading order plus window state."""

    post_id: str
    total_count: int
    root_count: int
    shown_root_count: int
    hidden_root_count: int
    show_all: bool
    comments: list[PublicCommentCard]


class CommentThreadController:
    """Per-visitor controller for a post's comment thread."""

    def __init__(
        self,
        post_id: PostId,
        visitor_id: VisitorId,
        comment_service: CommentService,
        like_service: LikeService,
        change_feed: ChangeFeed,
        settings: CommentSettings,
    ) -> None:
        self.post_id = post_id
        self.visitor_id = visitor_id
        self.comment_service = comment_service
        self.like_service = like_service
        self.change_feed = change_feed
        self.settings = settings

        self.comments: list[Comment] = []
        self.forest: list[CommentNode] = []
        self.liked: set[CommentId] = set()
        self.likes_counts: dict[CommentId, int] = {}
        self.show_all = False
        self.expanded: set[CommentId] = set()

        self._started = 0
        self._applied = 0
        self._subscriptions: list[Subscription] = []
        self._listeners: list[asyncio.Queue] = []

    @property
    def mounted(self) -> bool:
        return bool(self._subscriptions)

    async def mount(self) -> ThreadView:
        """Load the thread and start listening for changes."""
        with logfire.span("comment_thread.mount", post_id=str(self.post_id)):
            await self.refresh()
            if not self._subscriptions:
                self._subscriptions = [
                    self.change_feed.subscribe(
                        "comments", self._on_change, {"post_id": str(self.post_id)}
                    ),
                    self.change_feed.subscribe("comment_likes", self._on_change),
                ]
            return self.view()

    def unmount(self) -> None:
        """Tear down change subscriptions and end update streams."""
        for subscription in self._subscriptions:
            subscription.close()
        self._subscriptions = []
        for queue in self._listeners:
            queue.put_nowait(None)
        logfire.debug("Comment thread unmounted", post_id=str(self.post_id))

    async def _on_change(self, event: ChangeEvent) -> None:
        await self.refresh()

    async def refresh(self) -> bool:
        """Refetch comments and likes and rebuild the forest.

        Returns:
            False if a newer refresh started meanwhile and this result was
            discarded
        """
        self._started += 1
        generation = self._started

        comments = await self.comment_service.get_comments_for_post(self.post_id)
        liked = await self.like_service.get_liked_comment_ids(
            self.visitor_id, [c.id for c in comments]
        )

        if generation != self._started:
            logfire.debug(
                "Discarding superseded comment fetch",
                post_id=str(self.post_id),
                generation=generation,
                latest=self._started,
            )
            return False

        self.comments = comments
        self.forest = build_comment_forest(comments)
        self.liked = liked
        self.likes_counts = {c.id: c.likes_count for c in comments}
        self._applied = generation
        self._notify()
        return True

    def _notify(self) -> None:
        if not self._listeners:
            return
        view = self.view()
        for queue in self._listeners:
            queue.put_nowait(view)

    def updates(self) -> AsyncIterator[ThreadView]:
        """Yield the thread view after every applied refresh until unmount.

        The listener is registered at call time, so a refresh started
        right after this call is not missed.
        """
        queue: asyncio.Queue = asyncio.Queue()
        self._listeners.append(queue)
        return self._drain(queue)

    async def _drain(self, queue: asyncio.Queue) -> AsyncIterator[ThreadView]:
        try:
            while True:
                view = await queue.get()
                if view is None:
                    return
                yield view
        finally:
            if queue in self._listeners:
                self._listeners.remove(queue)

    def show_all_roots(self) -> ThreadView:
        self.show_all = True
        return self.view()

    def expand(self, comment_id: CommentId) -> ThreadView:
        self.expanded.add(comment_id)
        return self.view()

    def collapse(self, comment_id: CommentId) -> ThreadView:
        self.expanded.discard(comment_id)
        return self.view()

    def view(self) -> ThreadView:
        """Render the visible part of the thread.

        Only the last ``root_window`` roots are shown until ``show_all``.
        A reply deeper than ``collapse_depth`` is shown only when its parent
        has been expanded.
        """
        roots = self.forest
        if self.show_all or len(roots) <= self.settings.root_window:
            shown_roots = roots
        else:
            shown_roots = roots[-self.settings.root_window :]

        visible: set[CommentId] = set()
        cards: list[PublicCommentCard] = []
        for node, depth in walk_forest(shown_roots):
            parent_id = node.comment.parent_id
            if depth > 0:
                if parent_id not in visible:
                    continue
                if depth > self.settings.collapse_depth and parent_id not in self.expanded:
                    continue
            visible.add(node.id)

            children_collapsed = (
                depth + 1 > self.settings.collapse_depth and node.id not in self.expanded
            )
            cards.append(
                public_card(
                    node.comment,
                    depth=depth,
                    liked=node.id in self.liked,
                    likes_count=self.likes_counts.get(node.id, node.comment.likes_count),
                    can_reply=depth < self.settings.max_reply_depth,
                    reply_count=len(node.children),
                    replies_hidden=bool(node.children) and children_collapsed,
                    preview_length=self.settings.preview_length,
                )
            )

        return ThreadView(
            post_id=str(self.post_id),
            total_count=count_nodes(roots),
            root_count=len(roots),
            shown_root_count=len(shown_roots),
            hidden_root_count=len(roots) - len(shown_roots),
            show_all=self.show_all,
            comments=cards,
        )

    async def submit(
        self, draft: CommentDraft, parent_id: CommentId | None = None
    ) -> SubmitResult:
        """Validate and post a comment or reply.

        Validation runs before any backend call. On success the body is
        cleared and name/email are kept for the next comment; on failure
        the draft comes back untouched.
        """
        try:
            self.comment_service.validate_submission(
                draft.author_name, draft.author_email, draft.content
            )
        except ValidationError as e:
            return SubmitResult(ok=False, draft=draft, error=str(e), field=e.field)

        try:
            comment = await self.comment_service.create_comment(
                post_id=self.post_id,
                author_name=draft.author_name,
                author_email=draft.author_email,
                content=draft.content,
                parent_id=parent_id,
            )
        except ValidationError as e:
            return SubmitResult(ok=False, draft=draft, error=str(e), field=e.field)
        except NotFoundError as e:
            logfire.warn("Reply parent missing", post_id=str(self.post_id), error=str(e))
            return SubmitResult(ok=False, draft=draft, error=PARENT_MISSING, field="parent_id")
        except BackendError as e:
            logfire.warn("Comment submission failed", post_id=str(self.post_id), error=str(e))
            return SubmitResult(ok=False, draft=draft, error=SUBMIT_FAILED)

        try:
            await self.refresh()
        except BackendError as e:
            logfire.warn("Refresh after submission failed", error=str(e))

        return SubmitResult(
            ok=True,
            draft=draft.model_copy(update={"content": ""}),
            comment_id=str(comment.id),
        )

    async def toggle_like(self, comment_id: CommentId) -> LikeResult:
        """Optimistically flip the visitor's like on a comment.

        The displayed state flips first. If writing the like record fails
        the flip is reverted; a failed counter sync is ignored.
        """
        was_liked = comment_id in self.liked
        previous = self.likes_counts.get(comment_id, 0)
        count = max(0, previous - 1) if was_liked else previous + 1

        if was_liked:
            self.liked.discard(comment_id)
        else:
            self.liked.add(comment_id)
        self.likes_counts[comment_id] = count

        try:
            if was_liked:
                await self.like_service.unlike(comment_id, self.visitor_id)
            else:
                await self.like_service.like(comment_id, self.visitor_id)
        except (BackendError, DomainError) as e:
            logfire.warn("Like toggle failed", comment_id=str(comment_id), error=str(e))
            if was_liked:
                self.liked.add(comment_id)
            else:
                self.liked.discard(comment_id)
            self.likes_counts[comment_id] = previous
            return LikeResult(
                ok=False,
                comment_id=str(comment_id),
                liked=was_liked,
                likes_count=previous,
                error=LIKE_FAILED,
            )

        await self.like_service.sync_likes_count(comment_id, count)
        return LikeResult(
            ok=True, comment_id=str(comment_id), liked=not was_liked, likes_count=count
        )
