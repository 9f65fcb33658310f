from __future__ import annotations

from contextlib import contextmanager
from collections.abc import Generator

from flask import Flask, current_app, g
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker


def build_engine(db_url: str) -> Engine:
    engine_kwargs: dict[str, object] = {"future": True, "pool_pre_ping": True}
    if db_url.startswith("sqlite"):
        # The dev server and the test client may touch the connection from another thread.
        engine_kwargs["connect_args"] = {"check_same_thread": False}
    elif db_url.startswith("postgres"):
        engine_kwargs.update({"pool_recycle": 1800, "pool_size": 5, "max_overflow": 10})
    return create_engine(db_url, **engine_kwargs)


def init_db(app: Flask) -> None:
    engine = build_engine(app.config["DATABASE_URL"])
    app.extensions["sqlalchemy_engine"] = engine
    app.extensions["sqlalchemy_sessionmaker"] = sessionmaker(
        bind=engine,
        class_=Session,
        autoflush=False,
        expire_on_commit=False,
        future=True,
    )
    app.logger.info("Database engine ready (dialect=%s)", engine.dialect.name)


def db_session() -> Session:
    """
    Request-scoped session, created lazily and closed on app-context teardown.
    """
    s: Session | None = getattr(g, "db_session", None)
    if s is None:
        s = current_app.extensions["sqlalchemy_sessionmaker"]()
        g.db_session = s
    return s


def teardown_db_session(exc: BaseException | None) -> None:
    s: Session | None = g.pop("db_session", None)
    if s is None:
        return
    if exc is not None:
        s.rollback()
    s.close()


@contextmanager
def session_scope(app: Flask) -> Generator[Session, None, None]:
    """
    Non-request helper for scripts and tests: yields a session and commits/rolls back.
    """
    s: Session = app.extensions["sqlalchemy_sessionmaker"]()
    try:
        yield s
        s.commit()
    except Exception:
        s.rollback()
        raise
    finally:
        s.close()
