"""테스트 인프라: 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure: in-memory SQLite database, session, and httpx client fixtures.
Each test gets a fresh database built from Base.metadata, so no cleanup is needed.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from project_board.database import Base, get_db
from project_board.main import app
from project_board.models import *  # noqa: F401,F403
from project_board.models.project import Project, ProjectColumn, ProjectType
from project_board.models.repository import Repository

TEST_DATABASE_URL = "sqlite+aiosqlite://"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine(request) -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진: 단일 연결을 공유하는 인메모리 DB.

    ``@pytest.mark.foreign_keys``가 붙은 테스트는 SQLite FK 검사를 켭니다.
    """
    eng = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    if request.node.get_closest_marker("foreign_keys") is not None:
        @event.listens_for(eng.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session
        # 커밋되지 않은 변경 처리
        try:
            await session.commit()
        except Exception:
            await session.rollback()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트: DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성 (커밋하여 라우터의 rollback에도 유지)
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def org_project(db: AsyncSession) -> Project:
    """조직 프로젝트를 생성합니다."""
    p = Project(title="Org Roadmap", owner_id=1, type=ProjectType.ORGANIZATION)
    db.add(p)
    await db.commit()
    return p


@pytest_asyncio.fixture
async def repo_project(db: AsyncSession, repos) -> Project:
    """저장소 프로젝트를 생성합니다."""
    p = Project(title="Repo Board", owner_id=1, repo_id=repos[0].id, type=ProjectType.REPOSITORY)
    db.add(p)
    await db.commit()
    return p


@pytest_asyncio.fixture
async def column(db: AsyncSession, org_project: Project) -> ProjectColumn:
    """조직 프로젝트의 컬럼을 생성합니다."""
    c = ProjectColumn(project_id=org_project.id, title="In progress", sorting=1)
    db.add(c)
    await db.commit()
    return c


@pytest_asyncio.fixture
async def other_column(db: AsyncSession, org_project: Project) -> ProjectColumn:
    """같은 조직 프로젝트의 두 번째 컬럼."""
    c = ProjectColumn(project_id=org_project.id, title="Done", sorting=2)
    db.add(c)
    await db.commit()
    return c


@pytest_asyncio.fixture
async def repo_column(db: AsyncSession, repo_project: Project) -> ProjectColumn:
    """저장소 프로젝트의 컬럼을 생성합니다."""
    c = ProjectColumn(project_id=repo_project.id, title="Todo")
    db.add(c)
    await db.commit()
    return c


@pytest_asyncio.fixture
async def repos(db: AsyncSession) -> list[Repository]:
    """테스트 저장소 3개 (alpha, beta, gamma)를 생성합니다."""
    items = [
        Repository(owner_id=1, owner_name="acme", name=name)
        for name in ("alpha", "beta", "gamma")
    ]
    db.add_all(items)
    await db.commit()
    return items
