"""Users Table Mapping.

User 도메인 엔티티와 DB 테이블의 매핑입니다.
엔티티는 SQLAlchemy에 의존하지 않고, 변환은 row_to_user/user_to_values에서 처리합니다.

타입 규칙 (Unbounded String 기본 전략):
    - TEXT: 기본 문자열 타입
    - BIGINT: Unix timestamp (자격 증명 시각)
"""

from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    Integer,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from apps.accounts.domain.entities.user import User
from apps.accounts.domain.value_objects.credentials import Credentials
from apps.accounts.domain.value_objects.user_id import UserId

EMAIL_UNIQUE_CONSTRAINT = "uq_accounts_users_email"
USERNAME_UNIQUE_CONSTRAINT = "uq_accounts_users_username"

metadata = MetaData(schema="accounts")

users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("email", Text, nullable=False),
    Column("username", Text, nullable=False),
    Column("name", Text, nullable=False),
    Column("password_hash", Text, nullable=False),
    Column("confirmed", Boolean, nullable=False, server_default="false"),
    Column("credentials_version", Integer, nullable=False, server_default="0"),
    Column("last_password", Text, nullable=False, server_default=""),
    Column("password_updated_at", BigInteger, nullable=False),
    Column("credentials_updated_at", BigInteger, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    UniqueConstraint("email", name=EMAIL_UNIQUE_CONSTRAINT),
    UniqueConstraint("username", name=USERNAME_UNIQUE_CONSTRAINT),
)


def row_to_user(row: Mapping[str, Any]) -> User:
    """DB row -> User 엔티티."""
    return User(
        id_=UserId(value=row["id"]),
        email=row["email"],
        username=row["username"],
        name=row["name"],
        password_hash=row["password_hash"],
        confirmed=row["confirmed"],
        credentials=Credentials(
            version=row["credentials_version"],
            last_password=row["last_password"],
            password_updated_at=row["password_updated_at"],
            updated_at=row["credentials_updated_at"],
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_values(user: User) -> dict[str, Any]:
    """User 엔티티 -> 컬럼 값 (id 제외)."""
    return {
        "email": user.email,
        "username": user.username,
        "name": user.name,
        "password_hash": user.password_hash,
        "confirmed": user.confirmed,
        "credentials_version": user.credentials.version,
        "last_password": user.credentials.last_password,
        "password_updated_at": user.credentials.password_updated_at,
        "credentials_updated_at": user.credentials.updated_at,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }
