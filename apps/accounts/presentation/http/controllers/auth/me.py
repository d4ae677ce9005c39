"""Me Controller."""

from fastapi import APIRouter, Depends

from apps.accounts.application.profile.queries import GetCurrentUserQuery
from apps.accounts.domain.value_objects.user_id import UserId
from apps.accounts.presentation.http.auth.dependencies import get_current_user_id
from apps.accounts.presentation.http.mappers import to_auth_response_user
from apps.accounts.presentation.http.schemas import AuthResponseUser
from apps.accounts.setup.dependencies import get_current_user_query

router = APIRouter()


@router.get("/me", response_model=AuthResponseUser, summary="내 정보")
async def me(
    user_id: UserId = Depends(get_current_user_id),
    query: GetCurrentUserQuery = Depends(get_current_user_query),
) -> AuthResponseUser:
    user = await query.execute(user_id)
    return to_auth_response_user(user)
