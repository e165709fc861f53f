"""
Pydantic schemas describing the API contract.

Used for OpenAPI documentation of error and health responses.
No business logic belongs here.
"""

from pydantic import BaseModel, Field


class ErrorMessageSchema(BaseModel):
    """Error body returned when a request parameter is rejected."""

    code: int = Field(..., description="HTTP status code of the response")
    message: str = Field(..., description="Human-readable reason")


class HealthResponse(BaseModel):
    """Status, version and bindable parameter types of the service."""

    status: str
    version: str
    param_types: dict[str, str] = Field(
        default_factory=dict,
        description="Built-in parameter types, short name to type name",
    )
