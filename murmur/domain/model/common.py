"""Base model for comment entities and projections."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for domain models.

    Comments are never edited after insert, so every model is frozen.
    """

    model_config = ConfigDict(frozen=True)
