# catalog/main.py

import os
from fastapi import FastAPI, Query, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, FileResponse
from contextlib import asynccontextmanager
from sqlmodel import Session

from typing import List, Optional
from catalog.config import Settings
from catalog.models import ProductIn, ProductOut, ProductCreated
from catalog.database import create_db_engine, init_db, get_session
from catalog.seeder import seed_products
from catalog import product_service
import catalog.exceptions as ex

from catalog.logger import get_logger

log = get_logger(__name__)

PRODUCTS_PATH = "/api/products"


def create_app(settings: Settings) -> FastAPI:
  """Build the catalog API. The database is prepared when the app starts up."""

  @asynccontextmanager
  async def lifespan(app: FastAPI):
    # Application startup
    engine = create_db_engine(settings.database_url)
    app.state.engine = engine

    # Schema errors propagate and abort startup
    init_db(engine)
    seed_products(engine)

    log.info(f"Server started at http://localhost:{settings.port}")
    yield
    engine.dispose()
    log.info("Database engine disposed")

  app = FastAPI(title="Product Catalog",
                lifespan=lifespan,
                description="Product catalog API with category/name filtering and a single-page front-end.",
                version="1.0.0")
  app.state.settings = settings

  app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
  )


  @app.get(PRODUCTS_PATH, response_model=List[ProductOut])
  @app.get(PRODUCTS_PATH + "/", response_model=List[ProductOut], include_in_schema=False)
  def get_products(
    category: Optional[str] = Query(None, description="Exact category, 'all' disables the filter"),
    search: Optional[str] = Query(None, description="Case-insensitive substring of the product name"),
    session: Session = Depends(get_session)
    ):
    """
    List products ordered by id, optionally filtered by category and name.
    """
    try:
      return product_service.list_products(session, category=category, search=search)
    except ex.ProductFetchError as e:
      log.error(f"[API] GET /api/products error: {e.__cause__}")
      return JSONResponse(status_code=500, content={"error": e.message})


  @app.post(PRODUCTS_PATH, response_model=ProductCreated, status_code=status.HTTP_201_CREATED)
  @app.post(PRODUCTS_PATH + "/", response_model=ProductCreated, status_code=status.HTTP_201_CREATED, include_in_schema=False)
  def post_product(payload: ProductIn, session: Session = Depends(get_session)):
    """
    Create a product and return it with its generated id and created_at.
    """
    try:
      return product_service.create_product(session, payload)
    except ex.ProductCreateError as e:
      log.error(f"[API] POST /api/products error: {e.__cause__}")
      return JSONResponse(status_code=500, content={"error": e.message})


  @app.get("/{full_path:path}", include_in_schema=False)
  def serve_frontend(full_path: str):
    """Serve a static asset if one exists at the path, index.html otherwise."""
    static_root = os.path.realpath(settings.static_dir)
    candidate = os.path.realpath(os.path.join(static_root, full_path))
    if full_path and candidate.startswith(static_root + os.sep) and os.path.isfile(candidate):
      return FileResponse(candidate)

    index_html = os.path.join(static_root, "index.html")
    if os.path.isfile(index_html):
      return FileResponse(index_html)
    log.error(f"Front-end entry document not found in {static_root}")
    return JSONResponse(status_code=404, content={"error": "index.html not found"})


  @app.exception_handler(RequestValidationError)
  async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Create requests only fail as a whole; the body is never echoed back
    if request.method == "POST" and request.url.path.rstrip("/") == PRODUCTS_PATH:
      log.error(f"[API] POST /api/products rejected body: {exc.errors()}")
      return JSONResponse(status_code=500, content={"error": ex.ProductCreateError.public_message})
    return await request_validation_exception_handler(request, exc)


  @app.exception_handler(Exception)
  async def global_exception_handler(request: Request, exc: Exception):
      log.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
      return JSONResponse(
          status_code=500,
          content={"error": "Internal Server Error"},
      )

  return app
