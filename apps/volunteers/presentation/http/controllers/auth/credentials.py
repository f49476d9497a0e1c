"""Credentials Controller.

login/password 기반 회원가입 및 로그인 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends, status

from apps.volunteers.application.auth.commands import SignInInteractor
from apps.volunteers.application.auth.dto import SignInRequest as SignInCommand
from apps.volunteers.application.users.commands import CreateUserInteractor
from apps.volunteers.application.users.dto import CreateUserRequest
from apps.volunteers.presentation.http.schemas.auth import (
    SessionTokenResponse,
    SignInRequest,
    SignUpRequest,
)
from apps.volunteers.presentation.http.schemas.users import UserResponse
from apps.volunteers.setup.dependencies import (
    get_create_user_interactor,
    get_sign_in_interactor,
)

router = APIRouter()


@router.post(
    "/signup",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="회원가입",
)
async def signup(
    body: SignUpRequest,
    interactor: CreateUserInteractor = Depends(get_create_user_interactor),
) -> UserResponse:
    """recipient/volunteer 계정을 생성합니다. admin/master는 403."""
    view = await interactor.execute(
        CreateUserRequest(
            login=body.login,
            password=body.password,
            fullname=body.fullname,
            role=body.role,
            phone=body.phone,
            address=body.address,
            avatar=body.avatar,
            vk=body.vk,
            coordinates=body.coordinates,
        )
    )
    return UserResponse.model_validate(view)


@router.post(
    "/signin",
    response_model=SessionTokenResponse,
    summary="로그인",
)
async def signin(
    body: SignInRequest,
    interactor: SignInInteractor = Depends(get_sign_in_interactor),
) -> SessionTokenResponse:
    result = await interactor.execute(SignInCommand(login=body.login, password=body.password))
    return SessionTokenResponse.model_validate(result)
