"""Registration flow configuration."""

from pydantic import BaseModel, Field, model_validator


class RegistrationConfig(BaseModel):
    """Bounds and formats used by the slot validators."""

    min_age: int = Field(default=18, ge=0, description="Youngest accepted age")
    max_age: int = Field(default=120, gt=0, description="Oldest accepted age")
    min_lead_minutes: int = Field(
        default=60,
        ge=0,
        description="How far in the future a travel date must be",
    )
    date_format: str = Field(
        default="%m/%d/%Y",
        description="strftime format of the normalized travel date",
    )
    culture: str = Field(default="en-us", description="Recognition culture")

    @model_validator(mode="after")
    def check_age_bounds(self) -> "RegistrationConfig":
        if self.min_age > self.max_age:
            raise ValueError("min_age must not exceed max_age")
        return self
