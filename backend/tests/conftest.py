import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from modforge.database import Base
from modforge.models import file_record_db, project_db  # noqa: F401
from modforge.models.project import Platform
from modforge.repositories.file_repository import FileRepository
from modforge.repositories.project_repository import ProjectRepository
from modforge.services.file_manager import FileManager
from modforge.services.notification_service import NotificationService


@pytest.fixture
async def db_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def notification_service():
    return NotificationService()


@pytest.fixture
async def project(db_session):
    repo = ProjectRepository(db_session)
    return await repo.create_project(
        user_id="user1",
        name="Test Mod",
        platform=Platform.FORGE,
        minecraft_version="1.20.1",
    )


@pytest.fixture
def file_repository(db_session):
    return FileRepository(db_session)


@pytest.fixture
def file_manager(file_repository, notification_service, project):
    return FileManager(file_repository, notification_service, project.id)
