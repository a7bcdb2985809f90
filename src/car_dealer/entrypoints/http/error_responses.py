"""REST API error response models.

Structured error responses that provide a consistent format for HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "classified_id",
                "message": "Input should be a valid integer",
                "code": "int_parsing",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Classified with identifier '42' not found",
                "code": "NOT_FOUND"
            }

        Validation error with fields:
            {
                "detail": "Invalid request parameters",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "classified_id",
                        "message": "Input should be a valid integer",
                        "code": "int_parsing"
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
                {"detail": "Classified with identifier '42' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Invalid request parameters",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "classified_id",
                            "message": "Input should be a valid integer",
                            "code": "int_parsing",
                        },
                    ],
                },
            ]
        }
    )
