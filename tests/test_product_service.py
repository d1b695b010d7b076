# tests/test_product_service.py

from decimal import Decimal
import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import Session, select
from catalog.db_models import Product
from catalog.models import ProductIn
from catalog.seeder import seed_products
from catalog import product_service
from catalog.exceptions import ProductFetchError, ProductCreateError


def test_build_filters_without_criteria():
  assert product_service.build_filters() == []
  assert product_service.build_filters(category="all") == []
  assert product_service.build_filters(category="", search="") == []


def test_build_filters_keeps_values_out_of_sql_text():
  conditions = product_service.build_filters(category="tshirts", search="Polo")
  assert len(conditions) == 2

  compiled = select(Product).where(*conditions).compile()
  sql = str(compiled)
  assert "tshirts" not in sql
  assert "polo" not in sql.lower()
  assert "tshirts" in compiled.params.values()
  assert "%polo%" in compiled.params.values()


def test_list_products_with_session(engine):
  seed_products(engine)
  with Session(engine) as session:
    products = product_service.list_products(session, category="jeans", search="jeans")
  assert [p.name for p in products] == ["Slim Fit Blue Jeans", "Black Skinny Jeans", "Ripped Jeans"]
  assert products[0].price == 49.99


def test_create_product_treats_zero_as_missing(engine):
  with Session(engine) as session:
    created = product_service.create_product(
      session, ProductIn(name="Wool Scarf", price=Decimal("15.00"), ext_id=0, stock=0)
    )
  assert created.id is not None
  assert created.ext_id is None
  assert created.stock == 0
  assert created.price == 15.0


def test_list_products_raises_fetch_error(engine, monkeypatch):
  def broken_exec(self, *args, **kwargs):
    raise OperationalError("SELECT ...", {}, Exception("connection lost"))

  with Session(engine) as session:
    monkeypatch.setattr(Session, "exec", broken_exec)
    with pytest.raises(ProductFetchError) as excinfo:
      product_service.list_products(session)
  assert excinfo.value.message == "Failed to fetch products"
  assert isinstance(excinfo.value.__cause__, OperationalError)


def test_create_product_raises_create_error(engine, row_count):
  with Session(engine) as session:
    with pytest.raises(ProductCreateError) as excinfo:
      product_service.create_product(session, ProductIn(category="hats"))
  assert excinfo.value.message == "Failed to create product"
  assert row_count(engine) == 0
