"""Email Value Object."""

from __future__ import annotations

import re
from dataclasses import dataclass

from apps.accounts.domain.exceptions.validation import InvalidEmailError
from apps.accounts.domain.value_objects.base import ValueObject

# RFC 5322 간소화 버전
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+$")
EMAIL_MIN_LENGTH = 5
EMAIL_MAX_LENGTH = 255


@dataclass(frozen=True, slots=True)
class Email(ValueObject):
    """이메일 Value Object.

    자기 검증을 수행하여 항상 유효한 이메일만 존재합니다.
    저장/조회 전에 ``normalize``로 소문자·공백 제거 형태를 만듭니다.
    """

    value: str

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def normalize(cls, raw: str) -> "Email":
        """소문자 변환 및 앞뒤 공백 제거 후 생성."""
        return cls(value=raw.strip().lower())

    def _validate(self) -> None:
        if not self.value:
            raise InvalidEmailError("Email cannot be empty")
        if not EMAIL_MIN_LENGTH <= len(self.value) <= EMAIL_MAX_LENGTH:
            raise InvalidEmailError("Invalid email")
        if not EMAIL_PATTERN.match(self.value):
            raise InvalidEmailError("Invalid email")

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email({self.masked})"

    @property
    def masked(self) -> str:
        """로그용 마스킹 이메일."""
        local, domain = self.value.split("@", 1)
        return f"{local[:2]}***@{domain}"

    @property
    def domain(self) -> str:
        """이메일 도메인 반환."""
        return self.value.split("@", 1)[1]
