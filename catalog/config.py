# catalog/config.py

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from catalog.exceptions import ConfigurationError

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_STATIC_DIR = os.path.join(BASE_DIR, "static")


@dataclass(frozen=True)
class Settings:
  database_url: str
  port: int = DEFAULT_PORT
  host: str = DEFAULT_HOST
  static_dir: str = DEFAULT_STATIC_DIR
  app_env: str = "development"


def normalize_database_url(url: str) -> str:
  """
  Hosted Postgres providers hand out 'postgres://' URLs, which SQLAlchemy
  does not accept. Point both Postgres schemes at the psycopg 3 driver.
  """
  if url.startswith("postgres://"):
    return "postgresql+psycopg://" + url[len("postgres://"):]
  if url.startswith("postgresql://"):
    return "postgresql+psycopg://" + url[len("postgresql://"):]
  return url


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
  """
  Build Settings from the process environment (or the given mapping).

  Args:
    env: Mapping[str, str] : Variables to read instead of os.environ. No .env file is loaded when given.

  Raises:
    ConfigurationError: DATABASE_URL is missing or PORT is not an integer.
  """
  if env is None:
    load_dotenv()
    env = os.environ

  raw_url = (env.get("DATABASE_URL") or "").strip()
  if not raw_url:
    raise ConfigurationError("DATABASE_URL missing in environment")

  raw_port = env.get("PORT") or str(DEFAULT_PORT)
  try:
    port = int(raw_port)
  except ValueError as e:
    raise ConfigurationError(f"PORT must be an integer, got '{raw_port}'") from e

  return Settings(
    database_url=normalize_database_url(raw_url),
    port=port,
    host=env.get("HOST") or DEFAULT_HOST,
    static_dir=env.get("STATIC_DIR") or DEFAULT_STATIC_DIR,
    app_env=env.get("APP_ENV") or "development",
  )
