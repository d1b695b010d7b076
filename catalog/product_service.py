# catalog/product_service.py

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import Session, select
from catalog.db_models import Product
from catalog.models import ProductIn, ProductOut, ProductCreated
from catalog.exceptions import ProductFetchError, ProductCreateError
from catalog.logger import get_logger

log = get_logger(__name__)

# Category filter value meaning "no category restriction"
ALL_CATEGORIES = "all"


def build_filters(category: Optional[str] = None, search: Optional[str] = None) -> List[ColumnElement]:
  """
  Build the WHERE conditions for a product listing, in order.

  Every value ends up as a bound parameter of the returned expressions;
  nothing is spliced into the SQL text.

  Args:
    category (Optional[str]): Exact category match, skipped when empty or "all"
    search (Optional[str]): Case-insensitive substring of the product name

  Returns:
    List[ColumnElement]: Zero, one or two conditions to be ANDed
  """
  conditions = []
  if category and category != ALL_CATEGORIES:
    conditions.append(Product.category == category)
  if search:
    conditions.append(func.lower(Product.name).like(f"%{search.lower()}%"))
  return conditions


def _to_product_out(record: Product) -> ProductOut:
  return ProductOut(
    id=record.id,
    ext_id=record.ext_id,
    name=record.name,
    category=record.category,
    price=float(record.price),
    image=record.image,
    stock=record.stock
  )


def list_products(session: Session, category: Optional[str] = None, search: Optional[str] = None) -> List[ProductOut]:
  """
  Return products matching the optional filters, ordered by id.

  Raises:
    ProductFetchError: The query failed; no partial result is returned.
  """
  log.info(f"Listing products with category={category!r}, search={search!r}")

  statement = select(Product)
  conditions = build_filters(category, search)
  if conditions:
    statement = statement.where(*conditions)
  statement = statement.order_by(Product.id)

  try:
    records = session.exec(statement).all()
  except SQLAlchemyError as e:
    session.rollback()
    log.error(f"Error fetching products: {e}", exc_info=True)
    raise ProductFetchError() from e

  log.info(f"Found {len(records)} products")
  return [_to_product_out(record) for record in records]


def create_product(session: Session, payload: ProductIn) -> ProductCreated:
  """
  Insert a single product and return the stored row.

  ext_id falls back to null and stock to 0 when missing or zero. name and
  price are left to the table's NOT NULL constraints.

  Raises:
    ProductCreateError: The insert failed; nothing is written.
  """
  record = Product(
    ext_id=payload.ext_id or None,
    name=payload.name,
    category=payload.category,
    price=payload.price,
    image=payload.image,
    stock=payload.stock or 0
  )

  try:
    session.add(record)
    session.commit()
    session.refresh(record)
  except SQLAlchemyError as e:
    session.rollback()
    log.error(f"Error creating product '{payload.name}': {e}", exc_info=True)
    raise ProductCreateError() from e

  log.info(f"Created product id={record.id} name='{record.name}'")
  return ProductCreated(
    **_to_product_out(record).model_dump(),
    created_at=record.created_at
  )
