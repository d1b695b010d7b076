# tests/conftest.py

import os
import tempfile
import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

os.environ.setdefault("APP_ENV", "testing")
# Log files go to a throw-away directory, never into the working tree
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="catalog-test-logs-")

from catalog.config import Settings
from catalog.database import create_db_engine, init_db, count_products
from catalog.main import create_app
from catalog.logger import configure_logging
configure_logging()


@pytest.fixture(autouse=True)
def set_test_env(monkeypatch):
  monkeypatch.setenv("APP_ENV", "testing")


@pytest.fixture
def database_url(tmp_path):
  return f"sqlite:///{tmp_path / 'catalog.db'}"


@pytest.fixture
def settings(database_url):
  return Settings(database_url=database_url, app_env="testing")


@pytest.fixture
def client(settings):
  # Entering the client runs the lifespan: schema creation and seeding
  with TestClient(create_app(settings), raise_server_exceptions=False) as test_client:
    yield test_client


@pytest.fixture
def engine(database_url):
  engine = create_db_engine(database_url)
  init_db(engine)
  yield engine
  engine.dispose()


@pytest.fixture
def row_count():
  def _count(engine):
    with Session(engine) as session:
      return count_products(session)
  return _count
