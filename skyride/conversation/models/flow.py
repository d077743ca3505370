"""Registration flow state and the profile it fills."""

from pydantic import BaseModel, ConfigDict, Field

from skyride.conversation.models.enums import PendingQuestion


class FlowState(BaseModel):
    """The last question asked in the registration flow."""

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    pending_question: PendingQuestion = Field(
        default=PendingQuestion.NONE, description="Question awaiting an answer"
    )

    @property
    def in_progress(self) -> bool:
        return self.pending_question != PendingQuestion.NONE


class Profile(BaseModel):
    """Traveller record filled one slot per accepted answer."""

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    name: str | None = Field(default=None, description="Traveller name")
    age: int | None = Field(default=None, description="Traveller age")
    travel_date: str | None = Field(
        default=None, description="Normalized short date of the flight"
    )

    def is_empty(self) -> bool:
        return self.name is None and self.age is None and self.travel_date is None

    def is_complete(self) -> bool:
        return (
            self.name is not None
            and self.age is not None
            and self.travel_date is not None
        )
