"""컬럼-저장소 연결 모델: 다대다 매핑 테이블.

Column-Repository association model: Many-to-many mapping table.
Links repositories to the project board columns they appear in, with a
per-column display order.
"""

from sqlalchemy import Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from project_board.database import Base


class ColumnRepo(Base):
    """컬럼-저장소 연결 테이블.

    Column-Repository association table.
    A repository appears at most once per column. ``sorting`` orders the
    links of one column only and carries no meaning across columns.
    ``column_id`` and ``repo_id`` are plain indexed ids without database
    foreign keys, so a link may name a repository this database does not hold.

    Attributes:
        id: 고유 식별자 (Autoincrement primary key, breaks sorting ties)
        column_id: 컬럼 ID (Project board column id)
        repo_id: 저장소 ID (Repository id)
        sorting: 컬럼 내 정렬값 (Display order within the column, default 0)
    """

    __tablename__ = "project_board_repo"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    column_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    repo_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    sorting: Mapped[int] = mapped_column(
        Integer, default=0, server_default="0", nullable=False
    )

    __table_args__ = (
        UniqueConstraint("column_id", "repo_id", name="uq_project_board_repo_column_repo"),
    )

    # Relationships (ORM 레벨 조인, DB FK 없음)
    column = relationship(
        "ProjectColumn",
        primaryjoin="foreign(ColumnRepo.column_id) == ProjectColumn.id",
        back_populates="repo_links",
    )
    repo = relationship(
        "Repository",
        primaryjoin="foreign(ColumnRepo.repo_id) == Repository.id",
        back_populates="column_links",
    )
