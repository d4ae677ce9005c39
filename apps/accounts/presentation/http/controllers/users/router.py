"""Users Router.

프로필 조회/변경/삭제 엔드포인트입니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from apps.accounts.application.profile.commands import (
    ChangeEmailInteractor,
    DeleteAccountInteractor,
    UpdateProfileInteractor,
)
from apps.accounts.application.profile.dto import (
    ChangeEmailRequest,
    DeleteAccountRequest,
    UpdateProfileRequest,
)
from apps.accounts.application.profile.queries import GetUserQuery
from apps.accounts.domain.value_objects.user_id import UserId
from apps.accounts.presentation.http.auth.cookie_params import (
    clear_refresh_cookie,
    set_refresh_cookie,
)
from apps.accounts.presentation.http.auth.dependencies import get_current_user_id, get_origin
from apps.accounts.presentation.http.mappers import to_auth_response, to_response_user
from apps.accounts.presentation.http.schemas import (
    AuthResponse,
    ChangeEmailBody,
    PasswordBody,
    ResponseUser,
    UpdateUserBody,
)
from apps.accounts.setup.dependencies import (
    get_change_email_interactor,
    get_delete_account_interactor,
    get_update_profile_interactor,
    get_user_query,
)

router = APIRouter()


@router.get("/{id_or_username}", response_model=ResponseUser, summary="프로필 조회")
async def get_user(
    id_or_username: str,
    query: GetUserQuery = Depends(get_user_query),
) -> ResponseUser:
    """ID(UUID) 또는 사용자명으로 공개 프로필을 조회합니다."""
    user = await query.execute(id_or_username)
    return to_response_user(user)


@router.patch("", response_model=ResponseUser, summary="프로필 변경")
async def update_user(
    body: UpdateUserBody,
    user_id: UserId = Depends(get_current_user_id),
    interactor: UpdateProfileInteractor = Depends(get_update_profile_interactor),
) -> ResponseUser:
    user = await interactor.execute(
        UpdateProfileRequest(user_id=user_id, name=body.name, username=body.username)
    )
    return to_response_user(user)


@router.patch("/email", response_model=AuthResponse, summary="이메일 변경")
async def update_email(
    body: ChangeEmailBody,
    response: Response,
    user_id: UserId = Depends(get_current_user_id),
    origin: Optional[str] = Depends(get_origin),
    interactor: ChangeEmailInteractor = Depends(get_change_email_interactor),
) -> AuthResponse:
    """이메일을 변경합니다. 자격 증명 버전이 올라가므로 새 세션을 발급합니다."""
    result = await interactor.execute(
        ChangeEmailRequest(
            user_id=user_id,
            email=body.email,
            password=body.password,
            origin=origin,
        )
    )
    set_refresh_cookie(
        response,
        refresh_token=result.tokens.refresh_token,
        expires_at=result.tokens.refresh_expires_at,
    )
    return to_auth_response(result)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT, summary="계정 삭제")
async def delete_user(
    body: PasswordBody,
    user_id: UserId = Depends(get_current_user_id),
    interactor: DeleteAccountInteractor = Depends(get_delete_account_interactor),
) -> Response:
    await interactor.execute(DeleteAccountRequest(user_id=user_id, password=body.password))
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    clear_refresh_cookie(response)
    return response
