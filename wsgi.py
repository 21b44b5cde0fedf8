"""WSGI entry point for production deployment (gunicorn)."""

from app import create_app
from showdown_api.config import get_config
from showdown_api.logging_setup import setup_logging

config_class = get_config("production")
setup_logging(config_class.LOG_LEVEL)

app = create_app(config_class)
