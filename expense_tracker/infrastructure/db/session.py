# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, scoped_session, sessionmaker

from expense_tracker.shared.config import load_config
from expense_tracker.shared.config.settings import DatabaseConfig
from expense_tracker.shared.logging import logger


class Base(DeclarativeBase):
    pass


def _enable_sqlite_foreign_keys(dbapi_conn, _) -> None:
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA foreign_keys=ON;")
    finally:
        cur.close()


def build_engine(config: DatabaseConfig) -> Engine:
    """SQLite gets its own connect args; pool sizing applies to server databases only."""

    kwargs: dict[str, Any] = {"echo": False, "pool_pre_ping": True}
    is_sqlite = config.url.startswith("sqlite")
    if is_sqlite:
        kwargs["connect_args"] = {
            "check_same_thread": False,
            "timeout": int(config.pool_timeout),
        }
    else:
        kwargs.update(
            pool_size=config.pool_size,
            max_overflow=config.max_overflow,
            pool_timeout=config.pool_timeout,
        )

    engine = create_engine(config.url, **kwargs)
    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


ENGINE: Engine = build_engine(load_config().database)

SessionLocal = scoped_session(
    sessionmaker(bind=ENGINE, autoflush=False, autocommit=False, expire_on_commit=False)
)


def init_db() -> None:
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=ENGINE)
    logger.info("Database schema ensured")
