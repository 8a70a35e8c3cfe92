import os

# Tests chạy trên SQLite in-memory, phải set trước khi import src.*
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from passlib.context import CryptContext
from sqlalchemy.orm import sessionmaker

from main import app
from src.db.common.database_connection import create_db_engine, create_tables, get_db
from src.db.common.security import get_pwd_context
from src.db.common.settings import Settings
from src.db.book.models.book_models import Book


@pytest.fixture
def engine():
    engine = create_db_engine(Settings(database_url_override="sqlite://"))
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def pwd_context():
    # Cost thấp nhất của bcrypt cho tests nhanh
    return CryptContext(schemes=["bcrypt"], bcrypt__rounds=4)


@pytest.fixture
def books(db):
    db.add_all([
        Book(book_id=3, title="The Hobbit", category="fantasy"),
        Book(book_id=5, title="A Wizard of Earthsea", category="fantasy"),
        Book(book_id=7, title="Dune", category="science-fiction"),
        Book(book_id=9, title="Sapiens", category="history"),
    ])
    db.commit()


@pytest.fixture
def client(session_factory, pwd_context):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_pwd_context] = lambda: pwd_context
    yield TestClient(app)
    app.dependency_overrides.clear()
