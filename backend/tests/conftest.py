import os

# Set test environment
os.environ["DEBUG"] = "true"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["OAUTH_TOKEN_URL"] = "https://oauth.test/token"
os.environ["OAUTH_BASIC_INFO_URL"] = "https://oauth.test/basicinfo"
os.environ["OAUTH_CLIENT_ID"] = "queue-client"
os.environ["OAUTH_CLIENT_SECRET"] = "queue-secret"

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.database import Base, get_db
from app.main import app
from app.models import SystemConfig, Topic, User
from app.utils.oauth import OAuthProfile
from app.utils.tokens import NameClaims, ProfileClaims, get_token_issuer

TOKEN_URL = os.environ["OAUTH_TOKEN_URL"]
BASIC_INFO_URL = os.environ["OAUTH_BASIC_INFO_URL"]


@pytest.fixture
def database_url(tmp_path) -> str:
    # SQLite keeps the suite self-contained; point TEST_DATABASE_URL at PostgreSQL
    # to exercise the row lock as well
    return os.getenv("TEST_DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'queue.db'}")


@pytest_asyncio.fixture(scope="function")
async def async_engine(database_url: str):
    """Create async engine for each test."""
    engine = create_async_engine(database_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for each test."""
    async_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session_maker() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client with database session override."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def topic(db_session: AsyncSession) -> Topic:
    topic = Topic(topic_th="ลงทะเบียนเรียน", topic_en="Course registration", code="A")
    db_session.add(topic)
    await db_session.commit()
    await db_session.refresh(topic)
    return topic


@pytest_asyncio.fixture
async def other_topic(db_session: AsyncSession) -> Topic:
    topic = Topic(topic_th="ขอเอกสาร", topic_en="Document request", code="B")
    db_session.add(topic)
    await db_session.commit()
    await db_session.refresh(topic)
    return topic


@pytest_asyncio.fixture
async def staff_user(db_session: AsyncSession) -> User:
    """Staff user whose English names have not been synced yet."""
    user = User(first_name_th="สมศรี", last_name_th="ใจดี", email="somsri.j@cmu.ac.th")
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def system_config(db_session: AsyncSession) -> SystemConfig:
    config = SystemConfig(id=1, login_not_cmu=True)
    db_session.add(config)
    await db_session.commit()
    await db_session.refresh(config)
    return config


@pytest.fixture
def staff_headers(staff_user: User) -> dict[str, str]:
    token = get_token_issuer().issue(
        ProfileClaims(OAuthProfile(cmuitaccount=staff_user.email, firstname_TH="สมศรี")),
        visitor=False,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def visitor_headers() -> dict[str, str]:
    token = get_token_issuer().issue(NameClaims("Walk", "In"), visitor=True)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def staff_profile_data() -> dict[str, Any]:
    """Profile endpoint payload for the staff_user fixture."""
    return {
        "cmuitaccount_name": "somsri.j",
        "cmuitaccount": "somsri.j@cmu.ac.th",
        "student_id": "",
        "prename_TH": "นาง",
        "prename_EN": "Mrs.",
        "firstname_TH": "สมศรี",
        "firstname_EN": "SOMSRI",
        "lastname_TH": "ใจดี",
        "lastname_EN": "JAIDEE",
        "organization_code": "06",
        "organization_name_TH": "สำนักทะเบียนและประมวลผล",
        "organization_name_EN": "Registration Office",
        "itaccounttype_id": "MISEmpAcc",
        "itaccounttype_TH": "บุคลากร",
        "itaccounttype_EN": "MIS Employee",
    }


@pytest.fixture
def student_profile_data() -> dict[str, Any]:
    return {
        "cmuitaccount_name": "somchai_d",
        "cmuitaccount": "somchai_d@cmu.ac.th",
        "student_id": "650610001",
        "firstname_TH": "",
        "firstname_EN": "somchai",
        "lastname_TH": "",
        "lastname_EN": "dee",
        "organization_name_TH": "คณะวิศวกรรมศาสตร์",
        "itaccounttype_id": "StdAcc",
    }
