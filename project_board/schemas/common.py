"""공통 Pydantic 응답 스키마.

Common Pydantic response schemas shared across routers.
"""

from pydantic import BaseModel, ConfigDict


class MessageResponse(BaseModel):
    """단순 메시지 응답: Generic message response."""

    message: str


class ProjectColumnResponse(BaseModel):
    """프로젝트 컬럼 응답: Project board column."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    project_id: int
    title: str
    default: bool
    sorting: int
    color: str | None = None
