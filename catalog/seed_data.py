# catalog/seed_data.py

from decimal import Decimal

# Sample catalog inserted into an empty products table on first start.
SEED_PRODUCTS = (
  {"ext_id": 1, "name": "Classic White T-Shirt", "category": "tshirts", "price": Decimal("19.99"), "image": "https://images.unsplash.com/photo-1521572163474-6864f9cf17ab?w=400", "stock": 50},
  {"ext_id": 2, "name": "Cotton Polo Shirt", "category": "shirts", "price": Decimal("29.99"), "image": "https://images.unsplash.com/photo-1596755094514-f87e34085b2c?w=400", "stock": 30},
  {"ext_id": 3, "name": "Slim Fit Blue Jeans", "category": "jeans", "price": Decimal("49.99"), "image": "https://images.unsplash.com/photo-1542272454315-7f6d6f9a0cbe?w=400", "stock": 25},
  {"ext_id": 4, "name": "Casual Chino Pants", "category": "pants", "price": Decimal("39.99"), "image": "https://images.unsplash.com/photo-1473966968600-fa801b869a1a?w=400", "stock": 40},
  {"ext_id": 5, "name": "Graphic Print T-Shirt", "category": "tshirts", "price": Decimal("24.99"), "image": "https://images.unsplash.com/photo-1503341504253-dff4815485f1?w=400", "stock": 60},
  {"ext_id": 6, "name": "Formal Dress Shirt", "category": "shirts", "price": Decimal("44.99"), "image": "https://images.unsplash.com/photo-1602810318383-e386cc2a3ccf?w=400", "stock": 20},
  {"ext_id": 7, "name": "Black Skinny Jeans", "category": "jeans", "price": Decimal("54.99"), "image": "https://images.unsplash.com/photo-1541099649105-f69ad21f3246?w=400", "stock": 8},
  {"ext_id": 8, "name": "Cargo Pants", "category": "pants", "price": Decimal("42.99"), "image": "https://images.unsplash.com/photo-1624378439575-d8705ad7ae80?w=400", "stock": 28},
  {"ext_id": 9, "name": "V-Neck T-Shirt", "category": "tshirts", "price": Decimal("22.99"), "image": "https://images.unsplash.com/photo-1581655353564-df123a1eb820?w=400", "stock": 45},
  {"ext_id": 10, "name": "Denim Jacket", "category": "shirts", "price": Decimal("69.99"), "image": "https://images.unsplash.com/photo-1576995853123-5a10305d93c0?w=400", "stock": 15},
  {"ext_id": 11, "name": "Ripped Jeans", "category": "jeans", "price": Decimal("59.99"), "image": "https://images.unsplash.com/photo-1584370848010-d7fe6bc767ec?w=400", "stock": 22},
  {"ext_id": 12, "name": "Jogger Pants", "category": "pants", "price": Decimal("36.99"), "image": "https://images.unsplash.com/photo-1551028719-00167b16eac5?w=400", "stock": 35},
)
