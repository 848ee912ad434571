"""FastAPI 애플리케이션 엔트리포인트: 미들웨어 및 라우터 등록.

FastAPI application entry point: Logging, middleware and router registration.

Run with:
    uvicorn project_board.main:app
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from project_board import __version__
from project_board.api import api_router
from project_board.config import settings
from project_board.middleware.request_logging import RequestLoggingMiddleware
from project_board.utils.logging import configure_logging

configure_logging(settings.LOG_LEVEL)

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# 요청 로깅 미들웨어: CORS보다 먼저 등록하여 모든 요청을 캡처
# Registered before CORS to capture all requests
app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


app.include_router(api_router, prefix="/api/v1")
