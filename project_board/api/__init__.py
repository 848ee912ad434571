"""API 라우터 패키지: 모든 엔드포인트 통합.

API Router package: Aggregates all endpoints into a single router for
inclusion in the FastAPI application.

Included routers:
    - projects: 프로젝트 컬럼 조회 (Project board columns)
    - column_repos: 컬럼-저장소 연결 관리 (Column-repository links)
"""

from fastapi import APIRouter

from project_board.api.column_repos import router as column_repos_router
from project_board.api.projects import router as projects_router

api_router: APIRouter = APIRouter()

api_router.include_router(projects_router, tags=["Projects"])
api_router.include_router(column_repos_router, tags=["Project Column Repositories"])
