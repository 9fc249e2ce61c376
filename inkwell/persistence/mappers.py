"""Helpers for moving domain models in and out of backend rows."""

import re
from typing import Any

from inkwell.domain.model.common import DomainModel

RESERVED_SEARCH_CHARS = re.compile(r"[,()*\"\\:]")


def to_row(model: DomainModel, *, drop_none: tuple[str, ...] = ()) -> dict[str, Any]:
    """Serialize a model, leaving out the named columns when they are None.

    Dropped columns fall back to the backend's column defaults on insert.
    """
    row = model.to_record()
    for column in drop_none:
        if row.get(column) is None:
            row.pop(column, None)
    return row


def search_term(text: str) -> str:
    """Strip characters that would break a filter expression."""
    return RESERVED_SEARCH_CHARS.sub(" ", text).strip()
