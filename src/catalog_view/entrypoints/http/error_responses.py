"""REST API error response models.

Documents the structured error body returned by every exception handler.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error: which field failed and why."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "page-changed.page",
                "message": "Input should be greater than or equal to 1",
                "code": "greater_than_equal",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Rejected update:
            {"detail": "Unknown category: 'toys'", "code": "VALIDATION_ERROR"}

        Malformed event body:
            {
                "detail": "Invalid request parameters",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "rating-toggled.value",
                        "message": "Input should be less than or equal to 5",
                        "code": "less_than_equal"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Brand token must not be empty", "code": "VALIDATION_ERROR"},
                {"detail": "Invalid catalog file: data/catalog.json", "code": "INTERNAL_ERROR"},
            ]
        }
    )
