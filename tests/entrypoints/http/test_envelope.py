"""Tests for the response envelope model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from roomfinder_marketing.entrypoints.http.dtos.posts import PostPageDTO
from roomfinder_marketing.entrypoints.http.envelope import ApiResponse, ErrorBody


def test_ok_wraps_payload_without_error() -> None:
    envelope = ApiResponse.ok({"value": 1})

    assert envelope.model_dump() == {"success": True, "data": {"value": 1}, "error": None}


def test_ok_with_typed_payload_serializes_camel_case() -> None:
    page = PostPageDTO(content=[], page=1, size=10, total_elements=0, total_pages=0)

    body = ApiResponse[PostPageDTO].ok(page).model_dump(mode="json", by_alias=True)

    assert body["data"] == {
        "content": [],
        "page": 1,
        "size": 10,
        "totalElements": 0,
        "totalPages": 0,
    }


def test_fail_carries_error_and_no_data() -> None:
    envelope = ApiResponse.fail(
        "Validation failed",
        code="VALIDATION_ERROR",
        errors=[{"field": "status", "message": "Required", "code": "MISSING"}],
    )

    assert envelope.success is False
    assert envelope.data is None
    assert envelope.error is not None
    assert envelope.error.code == "VALIDATION_ERROR"
    assert envelope.error.errors is not None
    assert envelope.error.errors[0].field == "status"


def test_fail_without_field_errors() -> None:
    envelope = ApiResponse.fail("Post not found", code="NOT_FOUND")

    assert envelope.model_dump()["error"] == {
        "message": "Post not found",
        "code": "NOT_FOUND",
        "errors": None,
    }


def test_success_with_error_is_rejected() -> None:
    with pytest.raises(PydanticValidationError):
        ApiResponse(success=True, data=1, error=ErrorBody(message="boom"))


def test_failure_with_data_is_rejected() -> None:
    with pytest.raises(PydanticValidationError):
        ApiResponse(success=False, data=1, error=ErrorBody(message="boom"))


def test_failure_without_error_is_rejected() -> None:
    with pytest.raises(PydanticValidationError):
        ApiResponse(success=False)
