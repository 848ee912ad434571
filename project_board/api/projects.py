"""프로젝트 컬럼 조회 라우터.

Projects Router: read access to a project's board columns.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from project_board.database import get_db
from project_board.schemas.common import ProjectColumnResponse
from project_board.services.project_service import project_service

router: APIRouter = APIRouter()


@router.get(
    "/projects/{project_id}/columns",
    response_model=list[ProjectColumnResponse],
)
async def list_project_columns(
    project_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[ProjectColumnResponse]:
    """프로젝트의 보드 컬럼을 표시 순서대로 조회합니다. 프로젝트가 없으면 404."""
    columns = await project_service.get_project_columns(db, project_id)
    return [ProjectColumnResponse.model_validate(column) for column in columns]
