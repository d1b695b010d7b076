# catalog/logger.py

import logging
from logging.handlers import RotatingFileHandler
import os
import sys
import json
from datetime import datetime, timezone

# APP_ENV -> (root level, log file name, file handler level, max bytes, backups)
ENV_PROFILES = {
  "development": (logging.DEBUG, "app.log", logging.INFO, 5*1024*1024, 3),
  "testing": (logging.DEBUG, "test.log", logging.DEBUG, 1*1024*1024, 1),
  "production": (logging.INFO, "app.log", logging.INFO, 5*1024*1024, 3),
}

# Third-party loggers that are too chatty at the root level
QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "multipart")


class JsonFormatter(logging.Formatter):
  """One JSON object per line, with the call site and any traceback"""

  def format(self, record):
    payload = {
      "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
      "level": record.levelname,
      "logger": record.name,
      "message": record.getMessage(),
      "location": f"{record.pathname}:{record.lineno}",
      "function": record.funcName,
    }
    if record.exc_info:
      payload["exception"] = self.formatException(record.exc_info)
    return json.dumps(payload, default=str)


def _file_handler(path, level, max_bytes, backups, formatter):
  handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backups, encoding="utf-8")
  handler.setLevel(level)
  handler.setFormatter(formatter)
  return handler


def configure_logging(app_env=None, log_dir=None):
  """
  Route every logger through the root logger as JSON, to stdout and to a rotating file.

  Args:
    app_env: str : 'development', 'testing' or 'production'. Defaults to APP_ENV; unknown values fall back to production.
    log_dir: str : Directory for the log file. Defaults to LOG_DIR, then 'logs'.

  Returns:
    str: Path of the log file in use
  """
  app_env = app_env or os.getenv("APP_ENV", "development")
  log_dir = log_dir or os.getenv("LOG_DIR", "logs")
  root_level, file_name, file_level, max_bytes, backups = ENV_PROFILES.get(app_env, ENV_PROFILES["production"])

  os.makedirs(log_dir, exist_ok=True)
  log_path = os.path.join(log_dir, file_name)
  formatter = JsonFormatter()

  console = logging.StreamHandler(sys.stdout)
  console.setLevel(logging.INFO)
  console.setFormatter(formatter)

  root = logging.getLogger()
  root.setLevel(root_level)
  for handler in list(root.handlers):
    root.removeHandler(handler)
    handler.close()
  root.addHandler(console)
  root.addHandler(_file_handler(log_path, file_level, max_bytes, backups, formatter))

  for name in QUIET_LOGGERS:
    logging.getLogger(name).setLevel(logging.WARNING)

  return log_path


def get_logger(name):
  """Module logger; configure_logging() decides where its records go."""
  return logging.getLogger(name)
