"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for the error kinds of the
order read API, so services can raise them without choosing status codes.

Usage:
    from app.utils.exceptions import ValidationError
    raise ValidationError("offset must be >= 0")
"""

from fastapi import HTTPException, status


class ValidationError(HTTPException):
    """422 Unprocessable Entity 예외 — 잘못된 조회 파라미터.

    422 Unprocessable Entity exception.
    Raised for malformed pagination parameters (negative offset or limit).
    Values are rejected, never clamped.

    Args:
        detail: 오류 메시지 (Error message, default: "Invalid request parameters")
    """

    def __init__(self, detail: str = "Invalid request parameters") -> None:
        super().__init__(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=detail)


class DetachedAccessError(HTTPException):
    """500 Internal Server Error 예외 — 세션 밖에서 연관 엔티티 접근.

    500 Internal Server Error exception.
    Raised by the projection step when an association was not resolved while
    the data-access session was open. Returning null or stale data instead
    would silently corrupt the response.

    Args:
        detail: 오류 메시지 (Error message)
    """

    def __init__(self, detail: str = "Association accessed outside of its session") -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
