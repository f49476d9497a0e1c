"""User State Controller.

상태 변경, 활성화(키 지급), 차단 엔드포인트입니다. admin/master 전용.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from apps.volunteers.application.users.commands import (
    BlockUserInteractor,
    ChangeStatusInteractor,
    GiveKeyInteractor,
)
from apps.volunteers.domain.entities import User
from apps.volunteers.presentation.http.auth.dependencies import require_staff
from apps.volunteers.presentation.http.schemas.users import (
    ChangeStatusRequest,
    UserResponse,
)
from apps.volunteers.setup.dependencies import (
    get_block_user_interactor,
    get_change_status_interactor,
    get_give_key_interactor,
)

router = APIRouter()


@router.patch("/{user_id}/status", response_model=UserResponse, summary="봉사자 상태 변경")
async def change_status(
    user_id: UUID,
    body: ChangeStatusRequest,
    _: User = Depends(require_staff),
    interactor: ChangeStatusInteractor = Depends(get_change_status_interactor),
) -> UserResponse:
    return UserResponse.model_validate(await interactor.execute(user_id, body.status))


@router.patch("/{user_id}/activate", response_model=UserResponse, summary="봉사자 키 지급")
async def give_key(
    user_id: UUID,
    _: User = Depends(require_staff),
    interactor: GiveKeyInteractor = Depends(get_give_key_interactor),
) -> UserResponse:
    return UserResponse.model_validate(await interactor.execute(user_id))


@router.patch("/{user_id}/block", response_model=UserResponse, summary="차단 토글")
async def block_user(
    user_id: UUID,
    _: User = Depends(require_staff),
    interactor: BlockUserInteractor = Depends(get_block_user_interactor),
) -> UserResponse:
    return UserResponse.model_validate(await interactor.execute(user_id))
