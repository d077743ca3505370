"""Platform-neutral outbound message descriptors.

The host maps these to whatever its channel supports; nothing here knows
about cards, markup or channel-specific payloads.
"""

from pydantic import BaseModel, Field


class Attachment(BaseModel):
    """A media attachment referenced by URL."""

    content_url: str = Field(..., description="Where the media lives")
    content_type: str = Field(..., description="MIME type")
    name: str | None = Field(default=None, description="Display name")


class SuggestedAction(BaseModel):
    """A quick-reply choice offered to the user."""

    title: str = Field(..., description="Label shown to the user")
    value: str = Field(..., description="Text sent back when chosen")
    text: str | None = Field(default=None, description="Alternate text")


class OutboundMessage(BaseModel):
    """One message for the host to deliver, in order."""

    text: str | None = Field(default=None, description="Message text")
    attachments: list[Attachment] = Field(default_factory=list)
    suggested_actions: list[SuggestedAction] = Field(default_factory=list)

    @classmethod
    def of(cls, text: str) -> "OutboundMessage":
        """Build a plain text message."""
        return cls(text=text)
