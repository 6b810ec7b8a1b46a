"""기본 조회 레포지토리 — 모든 레포지토리의 부모 클래스.

Base read Repository — Parent class for domain repositories.
Provides generic canonical-order listing with an optional offset/limit window.
This API is read-only; there are no write helpers.

Usage:
    class OrderRepository(BaseRepository[Order]):
        def __init__(self) -> None:
            super().__init__(Order)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.utils.pagination import Window, apply_window

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 조회 레포지토리.

    Generic read repository. Every listing is ordered by primary key
    ascending, which is insertion order for auto-increment ids.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    def base_query(self) -> Select[Any]:
        """정렬된 기본 SELECT — Canonically ordered base SELECT."""
        return select(self.model).order_by(self.model.id)

    async def get_all(
        self,
        db: AsyncSession,
        window: Window | None = None,
    ) -> Sequence[ModelType]:
        """모든 레코드를 정렬 순서대로 조회합니다 (연관 엔티티 미로딩).

        Retrieve records in canonical order without loading any association.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            window: 조회 범위, None이면 전체 (Offset/limit window; None for all)

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록 (List of records)
        """
        query: Select[Any] = self.base_query()
        if window is not None:
            query = apply_window(query, window)
        result = await db.execute(query)
        return result.scalars().all()

    async def count(self, db: AsyncSession) -> int:
        """전체 레코드 수를 반환합니다 (Total record count)."""
        total: int = (await db.execute(select(func.count()).select_from(self.model))).scalar() or 0
        return total
