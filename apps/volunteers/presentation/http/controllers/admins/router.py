"""Admins Controller.

관리자 생성 및 권한 변경 엔드포인트입니다. master 전용.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from apps.volunteers.application.users.commands import (
    ChangeAdminPermissionsInteractor,
    CreateAdminInteractor,
)
from apps.volunteers.application.users.dto import CreateAdminRequest as CreateAdminCommand
from apps.volunteers.domain.entities import User
from apps.volunteers.presentation.http.auth.dependencies import require_master
from apps.volunteers.presentation.http.schemas.users import (
    ChangePermissionsRequest,
    CreateAdminRequest,
    UserResponse,
)
from apps.volunteers.setup.dependencies import (
    get_change_permissions_interactor,
    get_create_admin_interactor,
)

router = APIRouter()


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="관리자 생성",
)
async def create_admin(
    body: CreateAdminRequest,
    _: User = Depends(require_master),
    interactor: CreateAdminInteractor = Depends(get_create_admin_interactor),
) -> UserResponse:
    view = await interactor.execute(
        CreateAdminCommand(
            login=body.login,
            password=body.password,
            fullname=body.fullname,
            role=body.role,
            phone=body.phone,
            permissions=body.permissions,
        )
    )
    return UserResponse.model_validate(view)


@router.patch("/{user_id}/permissions", response_model=UserResponse, summary="권한 변경")
async def change_permissions(
    user_id: UUID,
    body: ChangePermissionsRequest,
    _: User = Depends(require_master),
    interactor: ChangeAdminPermissionsInteractor = Depends(get_change_permissions_interactor),
) -> UserResponse:
    return UserResponse.model_validate(await interactor.execute(user_id, body.permissions))
