"""Domain value objects for Inkwell.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from inkwell.domain.value.common import RootValueObject

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class PostStatus(str, Enum):
    """Publication status of a post."""

    DRAFT = "draft"
    PUBLISHED = "published"


class Role(str, Enum):
    """Roles stored in the backend's user_roles collection."""

    ADMIN = "admin"


class ChangeType(str, Enum):
    """Kind of row change delivered by the change feed."""

    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class UploadKind(str, Enum):
    """What an uploaded image is for; decides the size ceiling."""

    THUMBNAIL = "thumbnail"
    BRANDING = "branding"


class GatePhase(str, Enum):
    """Phase of a link gate.

    ``absent`` means no link resolved from the token: the gate is inert.
    ``access`` and ``absent`` are terminal.
    """

    ABSENT = "absent"
    TIMER = "timer"
    READY = "ready"
    PASSWORD = "password"
    ACCESS = "access"


class PostCardVariant(str, Enum):
    """Post card presentation."""

    COMPACT = "compact"
    FULL = "full"


class CommentCardVariant(str, Enum):
    """Comment card audience."""

    PUBLIC = "public"
    ADMIN = "admin"


class CommentFilterType(str, Enum):
    """Moderation list filter."""

    ALL = "all"
    COMMENTS = "comments"
    REPLIES = "replies"
    ADMIN = "admin"


class Slug(RootValueObject[str]):
    """URL slug of a post or category.

    Reader URLs may carry a trailing ``.html``; use ``from_path`` to
    normalize those before lookup.
    """

    @field_validator("root")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Slug must not be empty")
        if len(v) > 200:
            raise ValueError("Slug must be at most 200 characters")
        if re.search(r"[\s/?#]", v):
            raise ValueError("Slug must not contain whitespace, '/', '?' or '#'")
        return v

    @classmethod
    def from_path(cls, raw: str) -> "Slug":
        """Build a slug from a path segment, dropping a trailing ``.html``."""
        return cls(re.sub(r"\.html$", "", raw.strip()))


class Email(RootValueObject[str]):
    """Email address in ``local@domain.tld`` shape."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip()
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Please enter a valid email address")
        return v


def slugify(text: str) -> str:
    """Turn a title or category name into a slug.

    Drops anything that is not a word character, whitespace or hyphen,
    then joins words with single hyphens.
    """
    slug = text.lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value.strip()))
