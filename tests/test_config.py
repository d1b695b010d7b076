# tests/test_config.py

import pytest
import catalog.server as server_module
from fastapi.testclient import TestClient
from catalog.config import Settings, load_settings, normalize_database_url, DEFAULT_STATIC_DIR
from catalog.main import create_app
from catalog.exceptions import ConfigurationError


def test_missing_database_url_is_fatal():
  with pytest.raises(ConfigurationError):
    load_settings({})
  with pytest.raises(ConfigurationError):
    load_settings({"DATABASE_URL": "   "})


def test_defaults():
  settings = load_settings({"DATABASE_URL": "sqlite:///catalog.db"})
  assert settings.port == 3000
  assert settings.host == "0.0.0.0"
  assert settings.static_dir == DEFAULT_STATIC_DIR
  assert settings.app_env == "development"


def test_port_from_environment():
  assert load_settings({"DATABASE_URL": "sqlite:///catalog.db", "PORT": "8080"}).port == 8080
  with pytest.raises(ConfigurationError):
    load_settings({"DATABASE_URL": "sqlite:///catalog.db", "PORT": "eighty"})


def test_normalize_database_url():
  assert normalize_database_url("postgres://u:p@host/db?sslmode=require") == "postgresql+psycopg://u:p@host/db?sslmode=require"
  assert normalize_database_url("postgresql://u:p@host/db") == "postgresql+psycopg://u:p@host/db"
  assert normalize_database_url("postgresql+psycopg2://u:p@host/db") == "postgresql+psycopg2://u:p@host/db"
  assert normalize_database_url("sqlite:///catalog.db") == "sqlite:///catalog.db"


@pytest.fixture
def quiet_bootstrap(monkeypatch):
  # Keep caplog's handler and ignore any local .env file
  monkeypatch.setattr(server_module, "configure_logging", lambda: None)
  monkeypatch.setattr(server_module, "load_dotenv", lambda: None)


def test_bootstrap_exits_without_database_url(monkeypatch, quiet_bootstrap, caplog):
  monkeypatch.delenv("DATABASE_URL", raising=False)

  def fail_run(*args, **kwargs):
    raise AssertionError("server must not start")
  monkeypatch.setattr(server_module.uvicorn, "run", fail_run)

  with caplog.at_level("ERROR"):
    with pytest.raises(SystemExit) as excinfo:
      server_module.main()
  assert excinfo.value.code == 1
  assert any("DATABASE_URL missing" in message for message in caplog.messages)


def test_bootstrap_starts_server(monkeypatch, quiet_bootstrap, database_url):
  monkeypatch.setenv("DATABASE_URL", database_url)
  monkeypatch.setenv("PORT", "5055")
  monkeypatch.delenv("HOST", raising=False)
  calls = {}

  def fake_run(app, host, port, **kwargs):
    calls["app"] = app
    calls["host"] = host
    calls["port"] = port
  monkeypatch.setattr(server_module.uvicorn, "run", fake_run)

  server_module.main()
  assert calls["port"] == 5055
  assert calls["host"] == "0.0.0.0"
  assert calls["app"].state.settings.database_url == database_url


def test_schema_failure_aborts_startup(tmp_path):
  settings = Settings(database_url=f"sqlite:///{tmp_path / 'missing-dir' / 'catalog.db'}")
  with pytest.raises(Exception):
    with TestClient(create_app(settings)):
      pass
