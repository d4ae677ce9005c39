"""Response mappers.

애플리케이션 결과를 HTTP 응답 스키마로 변환합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.accounts.presentation.http.schemas import (
    AuthResponse,
    AuthResponseUser,
    MessageResponse,
    ResponseUser,
)

if TYPE_CHECKING:
    from apps.accounts.application.auth.dto import AuthResult
    from apps.accounts.application.common.dto import Message
    from apps.accounts.domain.entities.user import User


def to_auth_response_user(user: "User") -> AuthResponseUser:
    return AuthResponseUser(
        id=user.id_.value,
        name=user.name,
        username=user.username,
        email=user.email,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def to_auth_response(result: "AuthResult") -> AuthResponse:
    return AuthResponse(
        user=to_auth_response_user(result.user),
        access_token=result.tokens.access_token,
    )


def to_response_user(user: "User") -> ResponseUser:
    return ResponseUser(
        id=user.id_.value,
        name=user.name,
        username=user.username,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def to_message_response(message: "Message") -> MessageResponse:
    return MessageResponse(id=message.id, message=message.message)
