"""Settings read from the environment, with optional .env support."""

from __future__ import annotations
import os

from dotenv import load_dotenv

load_dotenv()

APP_TITLE = os.getenv("APP_TITLE", "Registration Form")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
TEMPLATES_DIR = os.getenv(
    "TEMPLATES_DIR", os.path.join(os.path.dirname(__file__), "templates")
)
