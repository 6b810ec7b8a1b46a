"""페이지네이션 유틸리티 모듈.

Pagination utility module for offset/limit windows.
Validates the requested window and applies it to SQLAlchemy queries.
"""

from dataclasses import dataclass
from typing import Any

from sqlalchemy import Select

from app.utils.exceptions import ValidationError


@dataclass(frozen=True)
class Window:
    """조회 범위 — offset/limit 쌍.

    Offset/limit window over the canonical order.

    Attributes:
        offset: 건너뛸 행 수, 0 이상 (Rows to skip, >= 0)
        limit: 최대 행 수, None이면 제한 없음 (Max rows; None means unbounded)
    """

    offset: int = 0
    limit: int | None = None


def validate_window(offset: int | None = 0, limit: int | None = None) -> Window:
    """offset/limit을 검증하여 Window를 생성합니다.

    Validate pagination parameters and build a Window.
    An absent offset means 0; an absent limit means "no bound".

    Raises:
        ValidationError: offset 또는 limit이 음수일 때 (Negative offset or limit)
    """
    offset = 0 if offset is None else offset
    if offset < 0:
        raise ValidationError(f"offset must be >= 0, got {offset}")
    if limit is not None and limit < 0:
        raise ValidationError(f"limit must be >= 0, got {limit}")
    return Window(offset=offset, limit=limit)


def apply_window(query: Select[Any], window: Window) -> Select[Any]:
    """쿼리에 OFFSET/LIMIT을 적용합니다.

    Apply the window to a SELECT. The query must already be ordered.
    """
    if window.offset:
        query = query.offset(window.offset)
    if window.limit is not None:
        query = query.limit(window.limit)
    return query
