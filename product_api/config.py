# product_api/config.py
import logging
import os

from dotenv import load_dotenv
from rich.logging import RichHandler

# Settings are read from the process environment; a local .env fills gaps.
load_dotenv()

DEFAULT_PORT = 3000


def _int_env(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


PORT: int = _int_env("PORT", DEFAULT_PORT)
HOST: str = os.getenv("HOST", "0.0.0.0").strip() or "0.0.0.0"

API_KEY: str = os.getenv("API_KEY", "mysecretapikey")
API_KEY_HEADER: str = (os.getenv("API_KEY_HEADER") or "x-api-key").strip().lower()

LOG_LEVEL: str = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
SEED_SAMPLE_DATA: bool = _bool_env("SEED_SAMPLE_DATA", True)

PRODUCTS_ROOT = "/api/products"


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Attach a RichHandler to the product_api logger. Safe to call twice.

    Only the package logger is touched, so uvicorn keeps its own log config
    whichever way the server is started.
    """
    app_logger = logging.getLogger("product_api")
    app_logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in app_logger.handlers):
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        app_logger.addHandler(handler)
    return app_logger
