import pytest
import os
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"

from jobly.database import Base, get_db
from jobly.main import app
from jobly.services.auth import create_token
from fastapi.testclient import TestClient

# SQLite in-memory database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture(scope="session", autouse=True)
def setup_database():
    """Create tables once for the whole test session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture(scope="function")
def db_session():
    """Get a clean database session for each test function with rollback safety."""
    connection = engine.connect()
    transaction = connection.begin()
    # Use sessionmaker with the active connection
    session = TestingSessionLocal(bind=connection)

    yield session

    session.close()
    if transaction.is_active:
        transaction.rollback()
    connection.close()

@pytest.fixture(scope="function")
def companies(db_session):
    """Three companies for jobs to point at."""
    db_session.execute(text(
        """INSERT INTO companies (handle, name, num_employees, description, logo_url)
           VALUES ('c1', 'C1', 1, 'Desc1', 'http://c1.img'),
                  ('c2', 'C2', 2, 'Desc2', 'http://c2.img'),
                  ('c3', 'C3', 3, 'Desc3', 'http://c3.img')"""
    ))
    return ["c1", "c2", "c3"]

@pytest.fixture(scope="function")
def test_jobs(db_session, companies):
    """Seed four jobs; returned in id order exactly as the API renders them."""
    rows = [
        ("job1", 50000, "1", "c1"),
        ("job2", 60000, "0", "c2"),
        ("job3", 40000, "0.5", "c3"),
        ("j4", 10000, "0", "c3"),
    ]
    jobs = []
    for title, salary, equity, handle in rows:
        result = db_session.execute(
            text(
                """INSERT INTO jobs (title, salary, equity, company_handle)
                   VALUES (:title, :salary, :equity, :handle)
                   RETURNING id"""
            ),
            {"title": title, "salary": salary, "equity": equity, "handle": handle},
        )
        jobs.append({
            "id": result.scalar_one(),
            "title": title,
            "salary": salary,
            "equity": equity,
            "companyHandle": handle,
        })
    return jobs

@pytest.fixture(scope="function")
def admin_token():
    return create_token("admin", is_admin=True)

@pytest.fixture(scope="function")
def user_token():
    return create_token("u1", is_admin=False)

@pytest.fixture(scope="function")
def auth_header():
    """Helper fixture to build Authorization headers."""
    def _auth_header(token):
        return {"Authorization": f"Bearer {token}"}
    return _auth_header

@pytest.fixture(scope="function")
def client(db_session):
    """Get a TestClient that uses the test database session via dependency override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

@pytest.fixture(scope="function")
def lenient_client(db_session):
    """Like `client`, but returns 500 responses instead of re-raising server errors."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()
