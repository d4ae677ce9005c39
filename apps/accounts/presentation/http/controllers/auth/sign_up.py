"""SignUp Controller."""

from typing import Optional

from fastapi import APIRouter, Depends, status

from apps.accounts.application.auth.commands import SignUpInteractor
from apps.accounts.application.auth.dto import SignUpRequest
from apps.accounts.presentation.http.auth.dependencies import get_origin
from apps.accounts.presentation.http.mappers import to_message_response
from apps.accounts.presentation.http.schemas import MessageResponse, SignUpBody
from apps.accounts.setup.dependencies import get_sign_up_interactor

router = APIRouter()


@router.post(
    "/sign-up",
    response_model=MessageResponse,
    summary="회원가입",
    status_code=status.HTTP_201_CREATED,
)
async def sign_up(
    body: SignUpBody,
    origin: Optional[str] = Depends(get_origin),
    interactor: SignUpInteractor = Depends(get_sign_up_interactor),
) -> MessageResponse:
    """미인증 계정을 만들고 인증 메일을 보냅니다. 로그인은 하지 않습니다."""
    result = await interactor.execute(
        SignUpRequest(
            name=body.name,
            email=body.email,
            password1=body.password1,
            password2=body.password2,
            origin=origin,
        )
    )
    return to_message_response(result)
