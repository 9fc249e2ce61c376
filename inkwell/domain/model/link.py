"""Shortened link entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import LinkId


class ShortenedLink(DomainModel):
    """Redirect descriptor revealed through a link gate.

    The gate is embedded on the post page named by ``post_slug``. The
    query token of a visitor's URL may match either ``alias`` or
    ``token``. ``password`` is compared in plaintext and is a deterrent
    only.
    """

    id: LinkId
    link_name: str = Field(min_length=1, max_length=200)
    original_url: str = Field(min_length=1)
    # Generated by the backend when no alias is given
    token: Optional[str] = None
    alias: Optional[str] = None
    password: Optional[str] = None
    post_slug: str
    clicks: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def public_token(self) -> str | None:
        """Token that goes into shared URLs: the alias when one is set."""
        return self.alias or self.token

    @property
    def is_protected(self) -> bool:
        return self.password is not None
