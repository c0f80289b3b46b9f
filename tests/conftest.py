from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker

from plaindate import Date, Month

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def march_fifth() -> Date:
    return Date(2001, Month.MARCH, 5)


@pytest.fixture
def november_fifteenth() -> Date:
    return Date(2009, Month.NOVEMBER, 15)


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, future=True)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()
