"""Uniform response envelope.

Every endpoint, successful or not, answers with the same outer shape:

    {"success": true,  "data": {...}, "error": null}
    {"success": false, "data": null,  "error": {"message": ..., "code": ...}}
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

T = TypeVar("T")


class ErrorDetail(BaseModel):
    """Field-level error inside a failure envelope."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "priceMin",
                "message": "Must be less than or equal to priceMax",
                "code": "INVALID_RANGE",
            }
        }
    )


class ErrorBody(BaseModel):
    message: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None


class ApiResponse(BaseModel, Generic[T]):
    success: bool
    data: T | None = None
    error: ErrorBody | None = None

    @model_validator(mode="after")
    def _payload_xor_error(self) -> ApiResponse[T]:
        if self.success and self.error is not None:
            raise ValueError("a successful response cannot carry an error")
        if not self.success and (self.error is None or self.data is not None):
            raise ValueError("a failed response carries an error and no data")
        return self

    @classmethod
    def ok(cls, data: Any) -> ApiResponse[Any]:
        return cls(success=True, data=data)

    @classmethod
    def fail(
        cls,
        message: str,
        code: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> ApiResponse[Any]:
        return cls(
            success=False,
            error=ErrorBody(
                message=message,
                code=code,
                errors=[ErrorDetail(**error) for error in errors] if errors else None,
            ),
        )
