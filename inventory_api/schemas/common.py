"""Common schemas for API requests and responses."""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer

# Prices are stored as Numeric(10, 2) and rendered as JSON numbers
Money = Annotated[
    Decimal,
    Field(ge=0, max_digits=10, decimal_places=2),
    PlainSerializer(float, return_type=float, when_used="json"),
]

Name = Annotated[str, Field(min_length=1, max_length=255)]

# Foreign key values sent in request bodies; INTEGER columns
RowId = Annotated[int, Field(ge=1, le=2**31 - 1)]


class MessageResponse(BaseModel):
    """Plain message body, used for confirmations and every error."""

    message: str = Field(description="Human-readable message")

    model_config = {"extra": "forbid"}


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Health status (healthy, degraded)")
    version: str = Field(description="Service version")
    environment: str = Field(description="Environment name")
    checks: dict[str, bool] = Field(default_factory=dict, description="Individual health checks")

    model_config = {"extra": "forbid"}
