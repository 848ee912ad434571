"""컬럼-저장소 연결 Pydantic 요청/응답 스키마.

Column-Repository link request/response schemas.
"""

from pydantic import BaseModel, ConfigDict


class ColumnRepoAdd(BaseModel):
    """컬럼에 저장소 연결 요청.

    Attributes:
        repo_id: 연결할 저장소 ID (Repository to link)
    """

    repo_id: int


class ColumnRepoSortingUpdate(BaseModel):
    """정렬값 변경 요청. 음수/중복 값도 허용.

    Attributes:
        sorting: 새 정렬값 (New sorting value, stored as given)
    """

    sorting: int


class ColumnRepoResponse(BaseModel):
    """생성된 연결 응답: Created link."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    column_id: int
    repo_id: int
    sorting: int


class RepoResponse(BaseModel):
    """저장소 응답: Repository summary."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    owner_name: str
    name: str
    full_name: str
    description: str | None = None
    is_private: bool = False


class RepoWithSortingResponse(BaseModel):
    """저장소와 컬럼 내 정렬값: Repository with its sorting in the column."""

    repo: RepoResponse
    sorting: int


class ColumnIDsResponse(BaseModel):
    """저장소가 속한 컬럼 ID 목록: Column ids linked to a repository (unordered)."""

    repo_id: int
    column_ids: list[int]
