"""Persisted user record, as much of it as the ranking core reads."""

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class User(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    location: str | None = None
    experience: str | None = None
    expected_salary: float | None = None
    skills: list[str] | None = None
    role: str = "candidate"

    @field_validator("experience", mode="before")
    @classmethod
    def _experience_as_text(cls, value):
        # Older records store experience as a number of years
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value
