"""Category entity and post assignment."""

from pydantic import Field

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import CategoryId, PostId, Slug


class Category(DomainModel):
    """Category entity. Names are unique."""

    id: CategoryId
    name: str = Field(min_length=1, max_length=100)
    slug: Slug


class PostCategory(DomainModel):
    """Row of the post/category join collection."""

    post_id: PostId
    category_id: CategoryId
