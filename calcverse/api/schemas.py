from typing import Any

from pydantic import BaseModel, Field


# --- Calculate ---
class CalculateRequest(BaseModel):
    inputs: dict[str, Any] = Field(default_factory=dict)


class CalculateResponse(BaseModel):
    slug: str
    inputs: dict[str, Any]
    results: dict[str, str]  # formatted, in declared output order
    error: str | None = None
