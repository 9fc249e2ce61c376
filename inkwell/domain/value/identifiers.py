"""Strongly typed identifiers for Inkwell domain entities.

Every record in the hosted backend is keyed by a UUID; NewType keeps
a post id from being passed where a comment id is expected.
"""

from typing import NewType
from uuid import UUID

PostId = NewType("PostId", UUID)
CategoryId = NewType("CategoryId", UUID)
CommentId = NewType("CommentId", UUID)
LikeId = NewType("LikeId", UUID)
LinkId = NewType("LinkId", UUID)
UserId = NewType("UserId", UUID)

# Generated once per browser, never tied to an account
VisitorId = NewType("VisitorId", UUID)
