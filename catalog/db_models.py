# catalog/db_models.py

from sqlmodel import SQLModel, Field
from sqlalchemy import Column, DateTime, Integer, text
from typing import Optional
from datetime import datetime
from decimal import Decimal

class Product(SQLModel, table=True):
  """Catalog item stored in the 'products' table"""
  __tablename__ = "products"
  __table_args__ = {"extend_existing": True}

  id: Optional[int] = Field(default=None, primary_key=True)
  ext_id: Optional[int] = None
  name: str
  category: Optional[str] = None
  price: Decimal = Field(max_digits=10, decimal_places=2)
  image: Optional[str] = None
  stock: Optional[int] = Field(
    default=0,
    sa_column=Column(Integer, server_default=text("0"))
  )
  created_at: Optional[datetime] = Field(
    default=None,
    sa_column=Column(DateTime(timezone=True), server_default=text("CURRENT_TIMESTAMP"))
  )
