"""
Pytest configuration file for backend testing.
"""
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

# Add the backend directory to Python path so imports work correctly
backend_dir = Path(__file__).parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

from core.config import Settings  # noqa: E402
from core.database import Base, build_engine, build_session_factory, get_db  # noqa: E402

# Import all models to register them with SQLAlchemy
from modules.tables.models import table_models  # noqa: E402,F401
from modules.menu.models import menu_models  # noqa: E402,F401
from modules.inventory.models import inventory_models  # noqa: E402,F401
from modules.staff.models import staff_models, attendance_models  # noqa: E402,F401
from modules.finance.models import finance_models  # noqa: E402,F401

from tests.factories.base import bind_session  # noqa: E402


@pytest.fixture
def test_settings():
    return Settings(
        environment="testing",
        database_url="sqlite://",
        create_tables_on_startup=False,
        log_level="WARNING",
    )


@pytest.fixture
def db_session():
    """In-memory database, created and dropped around each test"""
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    session = build_session_factory(engine)()
    bind_session(session)
    try:
        yield session
    finally:
        bind_session(None)
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session, test_settings):
    """API client whose requests share the test database session"""
    from app.main import create_app

    app = create_app(test_settings)

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def mock_db_session():
    """Session double for asserting that no database call was made"""
    return Mock(spec=Session)
