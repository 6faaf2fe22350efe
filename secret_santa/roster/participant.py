"""Participant model for the gift exchange roster."""

import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .groups import Group


def new_participant_id() -> str:
    """Generate a fresh opaque participant id."""
    return uuid.uuid4().hex


class Participant(BaseModel):
    """A person taking part in the exchange.

    Identity is the ``id``; ``name`` is only for display, so two participants
    may share a name.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_participant_id)
    name: str
    group: Group

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        return value

    def __str__(self) -> str:
        return self.name
