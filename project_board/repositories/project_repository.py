"""프로젝트 레포지토리: 프로젝트 및 보드 컬럼 조회.

Project Repository: lookups for projects and their board columns.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from project_board.models.project import Project, ProjectColumn
from project_board.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):

    def __init__(self) -> None:
        super().__init__(Project)


class ProjectColumnRepository(BaseRepository[ProjectColumn]):

    def __init__(self) -> None:
        super().__init__(ProjectColumn)

    async def get_by_project(
        self, db: AsyncSession, project_id: int
    ) -> list[ProjectColumn]:
        """프로젝트의 컬럼을 표시 순서대로 조회합니다.

        Retrieve a project's columns ordered by sorting.
        """
        query: Select = (
            select(ProjectColumn)
            .where(ProjectColumn.project_id == project_id)
            .order_by(ProjectColumn.sorting, ProjectColumn.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스
project_repository: ProjectRepository = ProjectRepository()
project_column_repository: ProjectColumnRepository = ProjectColumnRepository()
