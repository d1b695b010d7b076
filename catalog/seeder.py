# catalog/seeder.py

from typing import Iterable, Mapping
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
from catalog.db_models import Product
from catalog.database import count_products
from catalog.seed_data import SEED_PRODUCTS
from catalog.logger import get_logger

log = get_logger(__name__)


def seed_products(engine: Engine, products: Iterable[Mapping] = SEED_PRODUCTS) -> int:
  """
  Insert the sample catalog when the products table is empty.

  All rows are written in one transaction on a single connection. Any
  existing row, seeded or not, skips seeding entirely. Insert errors are
  logged and rolled back without being raised, so the server still starts.

  Args:
    engine: Engine : Process-wide engine
    products: Iterable[Mapping] : Rows to insert, defaults to SEED_PRODUCTS

  Returns:
    int: Number of rows inserted (0 when skipped or rolled back)
  """
  with Session(engine) as session:
    count = count_products(session)
    if count != 0:
      log.info(f"Products table already has {count} rows, skip seeding.")
      return 0

    log.info("Seeding products table...")
    rows = [Product(**p) for p in products]
    try:
      session.add_all(rows)
      session.commit()
    except SQLAlchemyError as e:
      session.rollback()
      log.error(f"Error seeding products: {e}", exc_info=True)
      return 0

  log.info("Seed complete.")
  return len(rows)
