"""Common HTTP Schemas."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# 대문자 1개 이상, 소문자 1개 이상, 숫자 또는 특수문자 1개 이상
PASSWORD_REGEX = re.compile(r"^(?=.*[A-Z])(?=.*[a-z])(?=.*(\d|\W))(?!.*\n).*$")
PASSWORD_MESSAGE = (
    "Password must have at least one uppercase letter and a number or special character"
)
NAME_REGEX = re.compile(r"^[\w'.\s-]*$")


def check_password(value: str) -> str:
    if not PASSWORD_REGEX.match(value):
        raise ValueError(PASSWORD_MESSAGE)
    return value


def check_name(value: str) -> str:
    if not NAME_REGEX.match(value):
        raise ValueError("Name must not have special characters")
    return value


class CamelModel(BaseModel):
    """camelCase JSON 필드를 사용하는 스키마 기반 클래스."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(CamelModel):
    """단순 메시지 응답."""

    id: str = Field(..., description="메시지 ID")
    message: str = Field(..., description="결과 메시지")
