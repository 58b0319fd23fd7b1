"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Details about a failed request, as shown to users."""

    model_config = ConfigDict(frozen=True)

    code: str
    reason: str
