from sqlalchemy import text

from equipment_service.db import _ensure_sqlite_dir, build_engine, build_session_factory


def test_sqlite_directory_created(tmp_path):
    db_file = tmp_path / "nested" / "equipment.db"

    _ensure_sqlite_dir(f"sqlite:///{db_file}")

    assert db_file.parent.is_dir()


def test_non_sqlite_url_untouched(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    _ensure_sqlite_dir("postgresql://user:pw@localhost/equipment")

    assert list(tmp_path.iterdir()) == []


def test_session_factory_connects(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'data' / 'equipment.db'}", echo=False)
    try:
        session = build_session_factory(engine)()
        try:
            assert session.execute(text("SELECT 1")).scalar() == 1
        finally:
            session.close()
    finally:
        engine.dispose()
