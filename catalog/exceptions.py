# catalog/exceptions.py

class CatalogException(Exception):
  """All catalog errors"""
  pass

class ConfigurationError(CatalogException):
  """Missing or malformed environment configuration raise"""
  pass

class ProductServiceError(CatalogException):
  """Storage error surfaced to clients with a fixed message"""
  public_message = "Internal Server Error"

  def __init__(self, message: str = None):
    self.message = message or self.public_message
    super().__init__(self.message)

class ProductFetchError(ProductServiceError):
  """Listing query failed"""
  public_message = "Failed to fetch products"

class ProductCreateError(ProductServiceError):
  """Insert of a new product failed"""
  public_message = "Failed to create product"
