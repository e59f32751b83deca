import os

# Must be set before study_scheduler.config is imported
os.environ["DATABASE_URL"] = "sqlite://"

import pytest

from study_scheduler.models import ActivityCategory
from study_scheduler.schemas import Activity, LearningConfig


@pytest.fixture
def make_activity():
    def _make(start, end, name="", category=ActivityCategory.OTHER, details=None, generated=False):
        return Activity(
            start_time=start,
            end_time=end,
            name=name,
            category=category,
            details=details,
            generated=generated,
        )
    return _make


@pytest.fixture
def config():
    return LearningConfig()


@pytest.fixture
def db_session():
    from study_scheduler.database import Base, SessionLocal, engine
    import study_scheduler.models  # noqa: F401  registers tables

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    from fastapi.testclient import TestClient
    from study_scheduler.main import app

    with TestClient(app) as test_client:
        yield test_client
