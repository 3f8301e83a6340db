# equipment_service/db.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
import os
import urllib.parse
from pathlib import Path

DB_URL = os.environ.get("EQUIPMENT_DB_URL", "sqlite:///./data/equipment.db")

def _ensure_sqlite_dir(url: str):
    if not url.startswith("sqlite"):
        return
    raw_path = url.split("sqlite:///", 1)[-1]
    if not raw_path or raw_path.startswith(":memory:"):
        return
    fs_path = Path(urllib.parse.unquote(raw_path))
    if not fs_path.is_absolute():
        fs_path = Path.cwd() / fs_path
    fs_path.parent.mkdir(parents=True, exist_ok=True)

def build_engine(url: str = DB_URL, echo: bool | None = None):
    if echo is None:
        echo = os.environ.get("SQL_ECHO", "0") == "1"
    _ensure_sqlite_dir(url)
    return create_engine(
        url,
        echo=echo,
        future=True,
        pool_pre_ping=True,
        connect_args={"check_same_thread": False} if url.startswith("sqlite") else {}
    )

def build_session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

_engine = None
_session_factory = None

def get_engine():
    global _engine
    if _engine is None:
        _engine = build_engine()
    return _engine

def get_session_factory():
    global _session_factory
    if _session_factory is None:
        _session_factory = build_session_factory(get_engine())
    return _session_factory

def dispose_engine():
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None
