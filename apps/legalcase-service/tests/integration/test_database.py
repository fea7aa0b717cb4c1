from sqlalchemy import inspect, text

from legalcase.db import database as dbmod


def test_sqlite_engine_enforces_foreign_keys():
    engine = dbmod.build_engine("sqlite+pysqlite:///:memory:")
    try:
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1
    finally:
        engine.dispose()


def test_in_memory_schema_survives_across_connections():
    engine = dbmod.build_engine("sqlite+pysqlite:///:memory:")
    try:
        dbmod.init_db(engine)
        with engine.connect() as conn:
            tables = set(inspect(conn).get_table_names())
        assert {"clients", "cases", "case_clients", "hearings", "documents", "users"} <= tables
    finally:
        engine.dispose()


def test_file_database_init_and_health(tmp_path):
    engine = dbmod.build_engine(f"sqlite:///{tmp_path / 'office.db'}")
    try:
        dbmod.init_db(engine)
        assert dbmod.health_check(engine) is True
        assert (tmp_path / "office.db").exists()
    finally:
        engine.dispose()


def test_health_check_reports_failure(tmp_path):
    engine = dbmod.build_engine(f"sqlite:///{tmp_path / 'missing' / 'office.db'}")
    try:
        assert dbmod.health_check(engine) is False
    finally:
        engine.dispose()


def test_get_db_closes_session(monkeypatch):
    closed = []

    class FakeSession:
        def close(self):
            closed.append(True)

    monkeypatch.setattr(dbmod, "SessionLocal", FakeSession)

    gen = dbmod.get_db()
    session = next(gen)
    assert isinstance(session, FakeSession)
    gen.close()

    assert closed == [True]
