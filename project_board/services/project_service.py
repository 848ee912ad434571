"""프로젝트 조회 서비스.

Project Service: entity lookups the column link service depends on.
Missing entities raise not-found errors instead of returning None.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from project_board.models.project import Project, ProjectColumn
from project_board.repositories.project_repository import (
    project_column_repository,
    project_repository,
)
from project_board.utils.exceptions import ColumnNotFoundError, ProjectNotFoundError


class ProjectService:

    async def get_column(
        self, db: AsyncSession, column_id: int, for_update: bool = False
    ) -> ProjectColumn:
        """컬럼을 조회합니다. 없으면 ColumnNotFoundError.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            column_id: 컬럼 ID (Column id)
            for_update: 행 잠금 여부 (Lock the column row until the transaction ends)

        Raises:
            ColumnNotFoundError: 컬럼이 없을 때 (Column does not exist)
        """
        column: ProjectColumn | None = await project_column_repository.get_by_id(
            db, column_id, for_update=for_update
        )
        if column is None:
            raise ColumnNotFoundError(column_id)
        return column

    async def get_project_by_id(self, db: AsyncSession, project_id: int) -> Project:
        """프로젝트를 조회합니다. 없으면 ProjectNotFoundError."""
        project: Project | None = await project_repository.get_by_id(db, project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    async def get_project_columns(
        self, db: AsyncSession, project_id: int
    ) -> list[ProjectColumn]:
        await self.get_project_by_id(db, project_id)
        return await project_column_repository.get_by_project(db, project_id)


# 싱글턴 인스턴스
project_service: ProjectService = ProjectService()
