"""SQLAlchemy ORM 모델 패키지: 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package: Central import point for all domain models.
Importing from this package registers every model with the SQLAlchemy
metadata, which Alembic and relationship resolution rely on.

Modules:
    project: 프로젝트 및 보드 컬럼 (Project and ProjectColumn)
    repository: 저장소 (Repository)
    column_repo: 컬럼-저장소 연결 (Column-Repository association)
"""

from project_board.models.project import Project, ProjectColumn, ProjectType
from project_board.models.repository import Repository
from project_board.models.column_repo import ColumnRepo

__all__ = [
    "Project", "ProjectColumn", "ProjectType",
    "Repository",
    "ColumnRepo",
]
