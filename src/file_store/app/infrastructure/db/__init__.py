from file_store.app.infrastructure.db.base import Base
from file_store.app.infrastructure.db.engine import build_engine, get_engine
from file_store.app.infrastructure.db.init_db import init_db
from file_store.app.infrastructure.db.session import build_session_factory

__all__ = ['Base', 'build_engine', 'get_engine', 'init_db', 'build_session_factory']
