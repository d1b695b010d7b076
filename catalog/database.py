# catalog/database.py

from typing import Iterator
from fastapi import Request
from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session, select
from catalog.db_models import Product
from catalog.logger import get_logger

log = get_logger(__name__)


def create_db_engine(database_url: str) -> Engine:
  """
  Create the process-wide engine. Its connection pool is shared by every
  request and must not be recreated while the app is running.
  """
  connect_args = {}
  if database_url.startswith("sqlite"):
    connect_args["check_same_thread"] = False

  engine = create_engine(database_url, echo=False, pool_pre_ping=True, connect_args=connect_args)
  log.info(f"Created database engine for dialect '{engine.dialect.name}'")
  return engine


def init_db(engine: Engine) -> None:
  """Creates the products table if it does not exist yet"""
  SQLModel.metadata.create_all(engine, tables=[Product.__table__], checkfirst=True)
  log.info("Initialized products table")


def count_products(session: Session) -> int:
  return session.exec(select(func.count()).select_from(Product)).one()


def get_session(request: Request) -> Iterator[Session]:
  """Request-scoped session; its connection goes back to the pool when the request ends"""
  with Session(request.app.state.engine) as session:
    yield session
