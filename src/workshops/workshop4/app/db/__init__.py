from .session import build_engine, build_session_maker, get_db_session, init_db

__all__ = ["build_engine", "build_session_maker", "get_db_session", "init_db"]
