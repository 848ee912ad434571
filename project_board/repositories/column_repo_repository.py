"""컬럼-저장소 연결 레포지토리.

Column-Repository Link Repository: DB queries for project_board_repo.
Pure query building; the organization-project rule lives in the service.
"""

from dataclasses import dataclass

from sqlalchemy import Select, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from project_board.models.column_repo import ColumnRepo
from project_board.models.repository import Repository
from project_board.repositories.base import BaseRepository


@dataclass
class RepoWithSorting:
    """저장소와 해당 컬럼 내 정렬값의 쌍: built per query, never persisted."""

    repo: Repository
    sorting: int


class ColumnRepoRepository(BaseRepository[ColumnRepo]):
    """project_board_repo 테이블에 대한 쿼리를 담당하는 레포지토리.

    Repository handling queries for the project_board_repo table.
    Column listings are ordered by sorting, then by link id, so rows that
    share a sorting value still come back in a stable order.
    """

    def __init__(self) -> None:
        super().__init__(ColumnRepo)

    def _column_repos_query(self, column_id: int, *columns) -> Select:
        return (
            select(Repository, *columns)
            .join(ColumnRepo, Repository.id == ColumnRepo.repo_id)
            .where(ColumnRepo.column_id == column_id)
            .order_by(ColumnRepo.sorting.asc(), ColumnRepo.id.asc())
        )

    async def get_max_sorting(self, db: AsyncSession, column_id: int) -> int:
        """컬럼 내 최대 정렬값을 조회합니다. 연결이 없으면 0.

        Return MAX(sorting) over the column's links, or 0 when it has none.
        """
        query: Select = select(func.coalesce(func.max(ColumnRepo.sorting), 0)).where(
            ColumnRepo.column_id == column_id
        )
        return (await db.execute(query)).scalar() or 0

    async def get_link(
        self, db: AsyncSession, column_id: int, repo_id: int
    ) -> ColumnRepo | None:
        """(column_id, repo_id) 연결을 조회합니다.

        Fetch the link for this pair, or None when the repository is not in the column.
        """
        query: Select = select(ColumnRepo).where(
            ColumnRepo.column_id == column_id,
            ColumnRepo.repo_id == repo_id,
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def delete_link(self, db: AsyncSession, column_id: int, repo_id: int) -> int:
        """(column_id, repo_id) 연결을 삭제합니다.

        Delete the link for this pair.

        Returns:
            int: 삭제된 행 수, 없으면 0 (Deleted row count, 0 when nothing matched)
        """
        result = await db.execute(
            delete(ColumnRepo).where(
                ColumnRepo.column_id == column_id,
                ColumnRepo.repo_id == repo_id,
            )
        )
        await db.flush()
        return result.rowcount or 0

    async def get_repos_by_column(
        self, db: AsyncSession, column_id: int
    ) -> list[Repository]:
        """컬럼에 연결된 저장소를 정렬 순서대로 조회합니다.

        Retrieve repositories linked to a column, ordered by sorting then link id.
        """
        result = await db.execute(self._column_repos_query(column_id))
        return list(result.scalars().all())

    async def get_repos_with_sorting(
        self, db: AsyncSession, column_id: int
    ) -> list[RepoWithSorting]:
        """저장소와 정렬값을 함께 조회합니다.

        Same ordering as get_repos_by_column, paired with each link's sorting.
        """
        result = await db.execute(self._column_repos_query(column_id, ColumnRepo.sorting))
        return [RepoWithSorting(repo=repo, sorting=sorting) for repo, sorting in result.all()]

    async def get_column_ids_by_repo(
        self, db: AsyncSession, repo_id: int
    ) -> list[int]:
        """저장소가 연결된 컬럼 ID 목록. 순서 보장 없음.

        Column ids the repository is linked to, in storage order.
        """
        result = await db.execute(
            select(ColumnRepo.column_id).where(ColumnRepo.repo_id == repo_id)
        )
        return list(result.scalars().all())

    async def update_sorting(
        self, db: AsyncSession, column_id: int, repo_id: int, sorting: int
    ) -> int:
        """연결의 정렬값을 변경합니다. 값 검증 없음.

        Set sorting on the (column_id, repo_id) link. Any integer is accepted,
        duplicates with sibling links included.

        Returns:
            int: 변경된 행 수 (Affected row count)
        """
        result = await db.execute(
            update(ColumnRepo)
            .where(
                ColumnRepo.column_id == column_id,
                ColumnRepo.repo_id == repo_id,
            )
            .values(sorting=sorting)
        )
        await db.flush()
        return result.rowcount or 0


# 싱글턴 인스턴스: Singleton instance
column_repo_repository: ColumnRepoRepository = ColumnRepoRepository()
