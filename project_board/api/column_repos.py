"""프로젝트 컬럼-저장소 연결 라우터.

Project Column Repositories Router: attach, detach, list and reorder
repositories inside project board columns.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from project_board.database import get_db
from project_board.schemas.column_repo import (
    ColumnIDsResponse,
    ColumnRepoAdd,
    ColumnRepoResponse,
    ColumnRepoSortingUpdate,
    RepoResponse,
    RepoWithSortingResponse,
)
from project_board.schemas.common import MessageResponse
from project_board.services.column_repo_service import column_repo_service
from project_board.utils.exceptions import DuplicateError

router: APIRouter = APIRouter()


@router.post(
    "/projects/columns/{column_id}/repos",
    response_model=ColumnRepoResponse,
    status_code=201,
)
async def add_repo_to_column(
    column_id: int,
    data: ColumnRepoAdd,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ColumnRepoResponse:
    """저장소를 컬럼 끝에 연결합니다. 조직 프로젝트만 가능.

    이미 연결된 경우에만 409, 그 외 무결성 오류는 그대로 전파합니다.
    """
    try:
        link = await column_repo_service.add_repo_to_column(db, column_id, data.repo_id)
        await db.commit()
    except IntegrityError:
        await db.rollback()
        if await column_repo_service.is_repo_in_column(db, column_id, data.repo_id):
            raise DuplicateError("Repository is already linked to this column")
        raise
    return ColumnRepoResponse.model_validate(link)


@router.delete(
    "/projects/columns/{column_id}/repos/{repo_id}",
    response_model=MessageResponse,
)
async def remove_repo_from_column(
    column_id: int,
    repo_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """컬럼에서 저장소 연결을 해제합니다. 연결이 없어도 성공."""
    await column_repo_service.remove_repo_from_column(db, column_id, repo_id)
    await db.commit()
    return {"message": "Repository removed from column"}


@router.get(
    "/projects/columns/{column_id}/repos",
    response_model=list[RepoResponse],
)
async def list_column_repos(
    column_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[RepoResponse]:
    """컬럼의 저장소를 정렬 순서대로 조회합니다."""
    repos = await column_repo_service.get_column_repos_by_column_id(db, column_id)
    return [RepoResponse.model_validate(repo) for repo in repos]


@router.get(
    "/projects/columns/{column_id}/repos/sorting",
    response_model=list[RepoWithSortingResponse],
)
async def list_column_repos_with_sorting(
    column_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[RepoWithSortingResponse]:
    """컬럼의 저장소를 정렬값과 함께 조회합니다."""
    items = await column_repo_service.get_column_repos_with_sorting(db, column_id)
    return [
        RepoWithSortingResponse(repo=RepoResponse.model_validate(item.repo), sorting=item.sorting)
        for item in items
    ]


@router.put(
    "/projects/columns/{column_id}/repos/{repo_id}/sorting",
    response_model=MessageResponse,
)
async def update_column_repo_sorting(
    column_id: int,
    repo_id: int,
    data: ColumnRepoSortingUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """컬럼 내 저장소 정렬값을 변경합니다."""
    await column_repo_service.update_column_repo_sorting(db, column_id, repo_id, data.sorting)
    await db.commit()
    return {"message": "Sorting updated"}


@router.get(
    "/repos/{repo_id}/project-columns",
    response_model=ColumnIDsResponse,
)
async def list_repo_column_ids(
    repo_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """저장소가 연결된 컬럼 ID 목록을 조회합니다. 순서 보장 없음."""
    column_ids = await column_repo_service.get_column_ids_by_repo_id(db, repo_id)
    return {"repo_id": repo_id, "column_ids": column_ids}
