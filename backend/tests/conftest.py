import os

# point the app at a throwaway database before catalog.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_catalog.db")
os.environ.setdefault("RESET_DB", "1")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from catalog.api.deps import get_product_repository
from catalog.db import init_db
from catalog.main import app
from catalog.repositories.memory_repo import InMemoryProductRepository


@pytest.fixture
def sql_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    session = sessionmaker(bind=engine, autoflush=False)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def demo_repo():
    return InMemoryProductRepository.with_demo_data()


@pytest.fixture
def client(demo_repo):
    app.dependency_overrides[get_product_repository] = lambda: demo_repo
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
