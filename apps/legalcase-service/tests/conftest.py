import pytest
from sqlalchemy.orm import sessionmaker

from legalcase.db.database import build_engine
from legalcase.db.models import Base
from legalcase.utils.passwords import Argon2PasswordHashing
from legalcase.utils.settings import refresh_settings_cache


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached per process; tests that patch env need a clean read."""
    refresh_settings_cache()
    yield
    refresh_settings_cache()


# Per-test in-memory database; StaticPool keeps one connection so the schema survives
@pytest.fixture
def _engine():
    engine = build_engine("sqlite+pysqlite:///:memory:")
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def db_session(_engine):
    SessionLocal = sessionmaker(bind=_engine, autoflush=False, autocommit=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


# Backwards compatibility: some tests expect a 'db' fixture name
@pytest.fixture
def db(db_session):
    return db_session


@pytest.fixture
def hasher():
    """Cheap Argon2id parameters; hashing cost is not under test."""
    return Argon2PasswordHashing(time_cost=1, memory_cost=8, parallelism=1)
