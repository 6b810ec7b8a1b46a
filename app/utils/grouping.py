"""안정 순서 그룹핑 유틸리티.

Stable-order grouping utilities.
A join against a one-to-many association repeats the parent once per child.
These helpers collapse such rows by a parent key while keeping the order in
which each key was first seen, so API output stays deterministic.
"""

from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def group_by_ordered(
    rows: Iterable[T],
    key: Callable[[T], K],
    value: Callable[[T], V | None],
) -> dict[K, list[V]]:
    """행을 키별로 묶습니다 — 키는 최초 등장 순서, 값은 입력 순서.

    Group rows by ``key``, preserving first-seen key order and the encounter
    order of values within each group.

    A ``value`` of None still registers the key but adds nothing to its list,
    which is how a parent with no children (outer join) keeps its place.

    Args:
        rows: 입력 행 (Input rows, possibly with repeated keys)
        key: 그룹 키 추출 함수 (Key extractor; must be hashable)
        value: 그룹 값 추출 함수 (Value extractor)

    Returns:
        dict[K, list[V]]: 삽입 순서가 보장되는 그룹 딕셔너리
                          (Insertion-ordered mapping of key to values)
    """
    groups: dict[K, list[V]] = {}
    for row in rows:
        bucket: list[V] = groups.setdefault(key(row), [])
        item = value(row)
        if item is not None:
            bucket.append(item)
    return groups
