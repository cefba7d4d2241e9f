import os
from typing import Iterable

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from src.dependencies import get_session_factory
from src.families.domain.entities.family import Family
from src.families.domain.entities.student import Student
from src.families.infrastructure.adapters.family_unit_of_work import FamilyUnitOfWork
from src.shared.infrastructure.database.base_model import Base
from src.shared.infrastructure.database.session import DatabaseSessionFactory

import src.families.infrastructure.persistence.models  # noqa: F401  (register tables)
from tests.factories import family_students, family_to_model, student_to_model


def _test_database_url() -> str:
    # In-memory SQLite unless a real database is provided
    return os.getenv("TEST_DATABASE_URL") or "sqlite+aiosqlite://"


@pytest.fixture
async def db():
    url = _test_database_url()
    kwargs = {"poolclass": StaticPool} if url.startswith("sqlite") else {}
    factory = DatabaseSessionFactory(url, **kwargs)
    async with factory.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield factory
    await factory.dispose()


@pytest.fixture
def uow(db: DatabaseSessionFactory) -> FamilyUnitOfWork:
    return FamilyUnitOfWork(db.session_factory)


@pytest.fixture
def seed(db: DatabaseSessionFactory):
    """Insert students and families (with their parents and children) and commit."""

    async def _seed(students: Iterable[Student] = (), families: Iterable[Family] = ()) -> None:
        families = list(families)
        rows: dict = {s.id: s for s in students}
        for family in families:
            for s in family_students(family):
                rows.setdefault(s.id, s)
        async with db.session_factory() as session:
            session.add_all([student_to_model(s) for s in rows.values()])
            await session.flush()
            session.add_all([family_to_model(f) for f in families])
            await session.commit()

    return _seed


@pytest.fixture
def app(db: DatabaseSessionFactory):
    from src.main import app as real_app

    real_app.dependency_overrides[get_session_factory] = lambda: db
    yield real_app
    real_app.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
