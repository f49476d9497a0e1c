"""Users Controller.

사용자 조회/수정/삭제 엔드포인트입니다.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from apps.volunteers.application.users.commands import (
    DeleteUserInteractor,
    UpdateUserInteractor,
)
from apps.volunteers.application.users.dto import UpdateUserRequest, UserView
from apps.volunteers.application.users.queries import GetUserQuery, ListUsersQuery
from apps.volunteers.domain.entities import User
from apps.volunteers.domain.exceptions import ForbiddenError
from apps.volunteers.presentation.http.auth.dependencies import (
    get_current_user,
    require_staff,
)
from apps.volunteers.presentation.http.schemas.users import (
    UserResponse,
    UserUpdateRequest,
)
from apps.volunteers.setup.dependencies import (
    get_delete_user_interactor,
    get_get_user_query,
    get_list_users_query,
    get_update_user_interactor,
)

router = APIRouter()


@router.get("/me", response_model=UserResponse, summary="내 정보 조회")
async def get_me(current_user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(UserView.from_entity(current_user))


@router.get("", response_model=list[UserResponse], summary="사용자 목록")
async def list_users(
    _: User = Depends(require_staff),
    query: ListUsersQuery = Depends(get_list_users_query),
) -> list[UserResponse]:
    views = await query.execute()
    return [UserResponse.model_validate(view) for view in views]


@router.get("/by-name/{fullname}", response_model=UserResponse, summary="이름으로 조회")
async def get_user_by_name(
    fullname: str,
    _: User = Depends(get_current_user),
    query: GetUserQuery = Depends(get_get_user_query),
) -> UserResponse:
    return UserResponse.model_validate(await query.by_fullname(fullname))


@router.get("/{user_id}", response_model=UserResponse, summary="ID로 조회")
async def get_user(
    user_id: UUID,
    _: User = Depends(get_current_user),
    query: GetUserQuery = Depends(get_get_user_query),
) -> UserResponse:
    return UserResponse.model_validate(await query.by_id(user_id))


@router.patch("/{user_id}", response_model=UserResponse, summary="프로필 수정")
async def update_user(
    user_id: UUID,
    body: UserUpdateRequest,
    current_user: User = Depends(get_current_user),
    interactor: UpdateUserInteractor = Depends(get_update_user_interactor),
) -> UserResponse:
    """본인 또는 admin/master만 수정할 수 있습니다."""
    if current_user.id != user_id and not current_user.role.is_staff:
        raise ForbiddenError()

    view = await interactor.execute(
        user_id,
        UpdateUserRequest(
            fullname=body.fullname,
            phone=body.phone,
            address=body.address,
            avatar=body.avatar,
            vk=body.vk,
            coordinates=body.coordinates,
        ),
    )
    return UserResponse.model_validate(view)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, summary="사용자 삭제")
async def delete_user(
    user_id: UUID,
    _: User = Depends(require_staff),
    interactor: DeleteUserInteractor = Depends(get_delete_user_interactor),
) -> None:
    await interactor.execute(user_id)
