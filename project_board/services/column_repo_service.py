"""컬럼-저장소 연결 서비스.

Column Repo Service: attaches repositories to project board columns and
keeps their per-column order.

A new link is appended after the column's current maximum sorting value.
That read and the insert are two statements: unless the caller's
transaction serializes them, two concurrent appends to the same column can
both read the same maximum and store equal sorting values. Listings break
such ties by link id. Setting ``COLUMN_REPO_LOCK_ON_APPEND`` (or passing
``lock=True``) locks the column row for the rest of the caller's
transaction before the maximum is read.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from project_board.config import settings
from project_board.models.column_repo import ColumnRepo
from project_board.models.project import Project, ProjectColumn
from project_board.models.repository import Repository
from project_board.repositories.column_repo_repository import (
    RepoWithSorting,
    column_repo_repository,
)
from project_board.services.project_service import project_service
from project_board.utils.exceptions import CannotBindRepoToRepoProjectError

logger = logging.getLogger(__name__)


class ColumnRepoService:

    async def add_repo_to_column(
        self,
        db: AsyncSession,
        column_id: int,
        repo_id: int,
        lock: bool | None = None,
    ) -> ColumnRepo:
        """저장소를 컬럼 끝에 연결합니다.

        Link a repository to a column, placing it after the existing links.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            column_id: 컬럼 ID (Column id)
            repo_id: 저장소 ID (Repository id)
            lock: 컬럼 행 잠금 여부, None이면 설정값 사용
                  (Lock the column row; None falls back to settings)

        Returns:
            ColumnRepo: 생성된 연결 (The created link)

        Raises:
            ColumnNotFoundError: 컬럼이 없을 때
            ProjectNotFoundError: 컬럼의 프로젝트가 없을 때
            CannotBindRepoToRepoProjectError: 조직 프로젝트가 아닐 때
            sqlalchemy.exc.IntegrityError: 이미 연결된 저장소 등 제약 위반
        """
        if lock is None:
            lock = settings.COLUMN_REPO_LOCK_ON_APPEND

        column: ProjectColumn = await project_service.get_column(db, column_id, for_update=lock)
        project: Project = await project_service.get_project_by_id(db, column.project_id)

        if not project.is_organization_project():
            raise CannotBindRepoToRepoProjectError()

        max_sorting: int = await column_repo_repository.get_max_sorting(db, column_id)

        link: ColumnRepo = await column_repo_repository.create(db, {
            "column_id": column_id,
            "repo_id": repo_id,
            "sorting": max_sorting + 1,
        })
        logger.info(
            "add_repo_to_column: column_id=%d, repo_id=%d, sorting=%d",
            column_id, repo_id, link.sorting,
        )
        return link

    async def remove_repo_from_column(
        self, db: AsyncSession, column_id: int, repo_id: int
    ) -> int:
        """연결을 삭제합니다. 연결이 없어도 오류가 아닙니다.

        Remove the link for this pair; a missing link is not an error.
        """
        deleted: int = await column_repo_repository.delete_link(db, column_id, repo_id)
        logger.info(
            "remove_repo_from_column: column_id=%d, repo_id=%d, deleted=%d",
            column_id, repo_id, deleted,
        )
        return deleted

    async def get_column_repos_by_column_id(
        self, db: AsyncSession, column_id: int
    ) -> list[Repository]:
        repos: list[Repository] = await column_repo_repository.get_repos_by_column(db, column_id)
        if repos:
            logger.info(
                "get_column_repos_by_column_id: column_id=%d, found %d repos",
                column_id, len(repos),
            )
        return repos

    async def get_column_repos_with_sorting(
        self, db: AsyncSession, column_id: int
    ) -> list[RepoWithSorting]:
        return await column_repo_repository.get_repos_with_sorting(db, column_id)

    async def get_column_ids_by_repo_id(
        self, db: AsyncSession, repo_id: int
    ) -> list[int]:
        return await column_repo_repository.get_column_ids_by_repo(db, repo_id)

    async def is_repo_in_column(
        self, db: AsyncSession, column_id: int, repo_id: int
    ) -> bool:
        """저장소가 이미 컬럼에 연결되어 있는지 확인합니다."""
        return await column_repo_repository.get_link(db, column_id, repo_id) is not None

    async def update_column_repo_sorting(
        self,
        db: AsyncSession,
        column_id: int,
        repo_id: int,
        sorting: int,
    ) -> int:
        """연결의 정렬값을 변경합니다.

        Set the sorting value of one link. The value is stored as given;
        a pair with no link is a no-op.

        Returns:
            int: 변경된 행 수 (Affected row count)
        """
        affected: int = await column_repo_repository.update_sorting(
            db, column_id, repo_id, sorting
        )
        logger.info(
            "update_column_repo_sorting: column_id=%d, repo_id=%d, sorting=%d, affected=%d",
            column_id, repo_id, sorting, affected,
        )
        return affected


# 싱글턴 인스턴스
column_repo_service: ColumnRepoService = ColumnRepoService()
