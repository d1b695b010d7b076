# catalog/server.py

import os
import sys

import uvicorn
from dotenv import load_dotenv

from catalog.config import load_settings
from catalog.exceptions import ConfigurationError
from catalog.logger import configure_logging, get_logger
from catalog.main import create_app

log = get_logger(__name__)


def main():
  """Read configuration, then serve. Schema and seed data are prepared before the first request."""
  load_dotenv()
  configure_logging()

  try:
    settings = load_settings(os.environ)
  except ConfigurationError as e:
    log.error(f"Startup aborted: {e}")
    sys.exit(1)

  log.info(f"Catalog service is starting on {settings.host}:{settings.port} (env={settings.app_env})")
  app = create_app(settings)
  uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
  main()
