"""Entity base."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

IdT = TypeVar("IdT")


class Entity(Generic[IdT]):
    """식별자 기반 동등성을 갖는 엔티티 기반 클래스."""

    __slots__ = ("id_",)

    def __init__(self, *, id_: IdT) -> None:
        self.id_ = id_

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.id_ == other.id_

    def __hash__(self) -> int:
        return hash(self.id_)
