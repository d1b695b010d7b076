# catalog/models.py

from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime
from decimal import Decimal

class ProductIn(BaseModel):
  # name and price are enforced by the table, not here.
  # Numbers are accepted for text columns the way the database casts them.
  model_config = ConfigDict(coerce_numbers_to_str=True)

  name: Optional[str] = None
  category: Optional[str] = None
  price: Optional[Decimal] = None
  image: Optional[str] = None
  stock: Optional[int] = None
  ext_id: Optional[int] = None

class ProductOut(BaseModel):
  id: int
  ext_id: Optional[int] = None
  name: str
  category: Optional[str] = None
  price: float
  image: Optional[str] = None
  stock: Optional[int] = None

class ProductCreated(ProductOut):
  created_at: Optional[datetime] = None
