"""SQLAlchemy implementation of users gateways.

UsersQueryGateway, UsersCommandGateway 포트의 구현체입니다.
드라이버 예외는 DataMapperError로, 고유 제약 위반은 ConflictError로 변환합니다.
"""

from __future__ import annotations

import logging

from sqlalchemy import delete, exists, func, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.accounts.application.common.exceptions import DataMapperError
from apps.accounts.domain.entities.user import User
from apps.accounts.domain.exceptions.auth import StaleCredentialsError
from apps.accounts.domain.exceptions.user import (
    ConflictError,
    EmailAlreadyInUseError,
    UsernameAlreadyInUseError,
)
from apps.accounts.domain.value_objects.user_id import UserId
from apps.accounts.infrastructure.persistence_postgres.mappings import (
    EMAIL_UNIQUE_CONSTRAINT,
    USERNAME_UNIQUE_CONSTRAINT,
    row_to_user,
    user_to_values,
    users_table,
)

logger = logging.getLogger(__name__)


def _conflict_from(error: IntegrityError) -> ConflictError:
    detail = str(error.orig)
    if EMAIL_UNIQUE_CONSTRAINT in detail:
        return EmailAlreadyInUseError()
    if USERNAME_UNIQUE_CONSTRAINT in detail:
        return UsernameAlreadyInUseError()
    return ConflictError()


class SqlaUsersQueryGateway:
    """사용자 조회 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _fetch_one(self, *criteria) -> User | None:
        stmt = select(users_table).where(*criteria)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.exception("User lookup failed")
            raise DataMapperError() from e
        row = result.mappings().one_or_none()
        return row_to_user(row) if row is not None else None

    async def _scalar(self, stmt):
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.exception("User query failed")
            raise DataMapperError() from e
        return result.scalar_one()

    async def get_by_id(self, user_id: UserId) -> User | None:
        return await self._fetch_one(users_table.c.id == user_id.value)

    async def get_by_email(self, email: str) -> User | None:
        return await self._fetch_one(users_table.c.email == email)

    async def get_by_username(self, username: str) -> User | None:
        return await self._fetch_one(users_table.c.username == username)

    async def get_by_credentials(self, user_id: UserId, version: int) -> User | None:
        return await self._fetch_one(
            users_table.c.id == user_id.value,
            users_table.c.credentials_version == version,
        )

    async def exists_by_email(self, email: str) -> bool:
        return await self._scalar(select(exists().where(users_table.c.email == email)))

    async def exists_by_username(self, username: str) -> bool:
        return await self._scalar(select(exists().where(users_table.c.username == username)))

    async def count_usernames_like(self, prefix: str) -> int:
        stmt = (
            select(func.count())
            .select_from(users_table)
            .where(users_table.c.username.startswith(prefix, autoescape=True))
        )
        return await self._scalar(stmt)


class SqlaUsersCommandGateway:
    """사용자 수정 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, user: User) -> None:
        """새 사용자를 생성합니다."""
        stmt = insert(users_table).values(id=user.id_.value, **user_to_values(user))
        await self._execute(stmt)

    async def update(self, user: User, *, expected_version: int) -> None:
        """사용자 정보를 업데이트합니다.

        ``credentials_version = expected_version``인 행만 갱신하고,
        갱신된 행이 없으면 StaleCredentialsError를 발생시킵니다.
        """
        stmt = (
            update(users_table)
            .where(
                users_table.c.id == user.id_.value,
                users_table.c.credentials_version == expected_version,
            )
            .values(**user_to_values(user))
        )

        result = await self._execute(stmt)
        if result.rowcount == 0:
            logger.warning(
                "Version-guarded update lost",
                extra={"user_id": str(user.id_), "expected_version": expected_version},
            )
            raise StaleCredentialsError("Concurrent credentials update")

    async def delete(self, user_id: UserId) -> None:
        """사용자를 삭제합니다."""
        await self._execute(delete(users_table).where(users_table.c.id == user_id.value))

    async def _execute(self, stmt):
        try:
            return await self._session.execute(stmt)
        except IntegrityError as e:
            raise _conflict_from(e) from e
        except SQLAlchemyError as e:
            logger.exception("User write failed")
            raise DataMapperError() from e
