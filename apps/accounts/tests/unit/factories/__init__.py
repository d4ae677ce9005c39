"""Test Factories.

테스트용 객체 생성 팩토리.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone

from apps.accounts.domain.entities.user import User
from apps.accounts.domain.value_objects.credentials import Credentials
from apps.accounts.domain.value_objects.user_id import UserId


def create_user(
    *,
    user_id: UserId | None = None,
    email: str = "john@example.com",
    username: str = "john.doe",
    name: str = "John Doe",
    password_hash: str = "hashed:Abcdef1!",
    confirmed: bool = True,
    credentials: Credentials | None = None,
) -> User:
    """테스트용 User 생성."""
    now = datetime.now(timezone.utc)
    return User(
        id_=user_id or UserId.generate(),
        email=email,
        username=username,
        name=name,
        password_hash=password_hash,
        confirmed=confirmed,
        credentials=credentials or Credentials.initial(int(time.time())),
        created_at=now,
        updated_at=now,
    )
