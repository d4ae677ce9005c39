"""Value Object base."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValueObject:
    """불변 Value Object 기반 클래스.

    동등성은 필드 값으로 판단합니다.
    """
