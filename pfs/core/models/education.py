"""Education model."""

from pydantic import BaseModel, Field

from .base import MAX_U16


class Education(BaseModel):
    """Education record of a portfolio. Replaced wholesale on update."""

    model_config = {"extra": "forbid"}

    degree: str = Field("", description="Degree or qualification obtained")
    school: str = Field("", description="Name of the school or university")
    graduationYear: int = Field(
        0, ge=0, le=MAX_U16, description="Year of graduation, 0 when unknown"
    )
