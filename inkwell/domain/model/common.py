"""Base model for all domain entities."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for domain models.

    Records are immutable snapshots of what the backend returned; changes
    go back through a repository and come back as new snapshots.
    Unknown columns from the backend are ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
    )

    @classmethod
    def from_record(cls, record: dict[str, Any]):
        """Build a model from a backend row."""
        return cls.model_validate(record)

    def to_record(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible backend row."""
        return self.model_dump(mode="json")
