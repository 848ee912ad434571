"""프로젝트 관련 SQLAlchemy ORM 모델 정의.

Project-related SQLAlchemy ORM model definitions.
Includes Project and its board columns (ProjectColumn).

Tables:
    - project: 프로젝트 (Project, scoped to a user, a repository or an organization)
    - project_board: 프로젝트 보드 컬럼 (Kanban-style column inside a project)
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from project_board.database import Base


class ProjectType(enum.IntEnum):
    """프로젝트 범위: Scope a project belongs to."""

    INDIVIDUAL = 1
    REPOSITORY = 2
    ORGANIZATION = 3


class Project(Base):
    """프로젝트 모델.

    Project model: owns an ordered set of board columns.
    Only organization-scoped projects may link repositories to their columns.

    Attributes:
        id: 고유 식별자 (Autoincrement primary key)
        title: 프로젝트 제목 (Project title)
        description: 설명 (Optional description)
        owner_id: 소유자 ID, 조직 또는 사용자 (Owning organization/user id)
        repo_id: 저장소 프로젝트의 저장소 ID, 그 외 0 (Repository id for repository projects, else 0)
        type: 프로젝트 범위 (ProjectType)
        is_closed: 종료 여부 (Closed flag)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        columns: 보드 컬럼 목록 (Board columns, cascade delete)
    """

    __tablename__ = "project"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    owner_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)
    repo_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)
    # ProjectType 값을 정수로 저장: stored as the enum's integer value
    type: Mapped[int] = mapped_column(Integer, nullable=False, default=ProjectType.INDIVIDUAL)
    is_closed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    columns = relationship("ProjectColumn", back_populates="project", cascade="all, delete-orphan")

    def is_organization_project(self) -> bool:
        """조직 프로젝트 여부: True when the project is organization-scoped."""
        return self.type == ProjectType.ORGANIZATION

    def is_repository_project(self) -> bool:
        """저장소 프로젝트 여부: True when the project belongs to one repository."""
        return self.type == ProjectType.REPOSITORY


class ProjectColumn(Base):
    """프로젝트 보드 컬럼 모델.

    Board column inside a project (e.g. "Todo", "In progress").

    Attributes:
        id: 고유 식별자 (Autoincrement primary key)
        project_id: 소속 프로젝트 FK (Parent project foreign key)
        title: 컬럼 제목 (Column title)
        default: 기본 컬럼 여부 (Whether new issues land here)
        sorting: 프로젝트 내 표시 순서 (Display order within the project)
        color: 표시 색상 (Optional hex color)
    """

    __tablename__ = "project_board"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("project.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    default: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    sorting: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    color: Mapped[str | None] = mapped_column(String(7), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    project = relationship("Project", back_populates="columns")
    repo_links = relationship(
        "ColumnRepo",
        primaryjoin="ProjectColumn.id == foreign(ColumnRepo.column_id)",
        back_populates="column",
        cascade="all, delete-orphan",
    )
