"""SQL 실행 횟수 카운터 — 세션 단위 라운드트립 측정.

Per-session SQL statement counter.
Every statement executed through a Session (explicit queries, lazy loads
and selectin loads alike) increments ``session.info["statement_count"]``.
Joined eager loads ride on their parent statement and are not counted twice.

Usage:
    before = statement_count(db)
    await order_repository.find_all(db)
    issued = statement_count(db) - before
"""

from typing import Any

from sqlalchemy import event
from sqlalchemy.orm import ORMExecuteState, Session

# session.info 키 — Key used inside session.info
STATEMENT_COUNT_KEY: str = "statement_count"


@event.listens_for(Session, "do_orm_execute")
def _count_statement(orm_execute_state: ORMExecuteState) -> None:
    info: dict[str, Any] = orm_execute_state.session.info
    info[STATEMENT_COUNT_KEY] = info.get(STATEMENT_COUNT_KEY, 0) + 1


def statement_count(session: Any) -> int:
    """세션이 지금까지 실행한 SQL 수를 반환합니다.

    Return the number of statements the given (sync or async) session has run.
    """
    return session.info.get(STATEMENT_COUNT_KEY, 0)
