"""DTO for backend failures reported by the JSON endpoints."""

from pydantic import BaseModel, Field

from power_terminal.domain.entities.errors import (
    HomeAssistantError,
    HomeAssistantErrorType,
)


class ErrorResponseDTO(BaseModel):
    detail: str = Field(description="Human readable error message")
    category: HomeAssistantErrorType = Field(description="Failure category")

    @classmethod
    def from_domain(cls, error: HomeAssistantError) -> "ErrorResponseDTO":
        return cls(detail=error.message, category=error.category)

    model_config = {
        "json_schema_extra": {
            "example": {"detail": "Unable to connect to Home Assistant", "category": "network"}
        }
    }
