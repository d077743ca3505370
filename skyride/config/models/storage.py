"""Session storage configuration."""

from typing import Literal

from pydantic import BaseModel, Field

SessionBackend = Literal["inmemory"]


class StorageConfig(BaseModel):
    """Where per-conversation state is kept."""

    session_backend: SessionBackend = Field(
        default="inmemory",
        description="Session store backend",
    )
