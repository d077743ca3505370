"""HTTP host configuration."""

from pydantic import BaseModel, Field


class APIConfig(BaseModel):
    """HTTP server configuration for the conversation host."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=False,
        description="Allow credentials on CORS requests",
    )
    bot_id: str = Field(
        default="skyride-bot",
        description="Member id the bot uses on conversation updates",
    )
