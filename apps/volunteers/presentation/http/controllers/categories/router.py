"""Categories Controller.

조회는 공개, 생성/수정/삭제는 admin/master 전용입니다.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from apps.volunteers.application.categories.commands import (
    CreateCategoryInteractor,
    DeleteCategoryInteractor,
    UpdateCategoryInteractor,
)
from apps.volunteers.application.categories.dto import (
    CreateCategoryRequest,
    UpdateCategoryRequest,
)
from apps.volunteers.application.categories.queries import GetCategoriesQuery
from apps.volunteers.domain.entities import User
from apps.volunteers.presentation.http.auth.dependencies import require_staff
from apps.volunteers.presentation.http.schemas.categories import (
    CategoryCreateRequest,
    CategoryResponse,
    CategoryUpdateRequest,
)
from apps.volunteers.setup.dependencies import (
    get_categories_query,
    get_create_category_interactor,
    get_delete_category_interactor,
    get_update_category_interactor,
)

router = APIRouter()


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    query: GetCategoriesQuery = Depends(get_categories_query),
) -> list[CategoryResponse]:
    return [CategoryResponse.model_validate(c) for c in await query.list_all()]


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: UUID,
    query: GetCategoriesQuery = Depends(get_categories_query),
) -> CategoryResponse:
    return CategoryResponse.model_validate(await query.by_id(category_id))


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    body: CategoryCreateRequest,
    _: User = Depends(require_staff),
    interactor: CreateCategoryInteractor = Depends(get_create_category_interactor),
) -> CategoryResponse:
    category = await interactor.execute(
        CreateCategoryRequest(title=body.title, points=body.points)
    )
    return CategoryResponse.model_validate(category)


@router.patch("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: UUID,
    body: CategoryUpdateRequest,
    _: User = Depends(require_staff),
    interactor: UpdateCategoryInteractor = Depends(get_update_category_interactor),
) -> CategoryResponse:
    category = await interactor.execute(
        category_id, UpdateCategoryRequest(title=body.title, points=body.points)
    )
    return CategoryResponse.model_validate(category)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: UUID,
    _: User = Depends(require_staff),
    interactor: DeleteCategoryInteractor = Depends(get_delete_category_interactor),
) -> None:
    await interactor.execute(category_id)
