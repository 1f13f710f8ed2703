"""Runtime configuration read from environment variables."""

import os

from dotenv import load_dotenv

# Load .env file from project root (if it exists)
load_dotenv()

APP_TITLE = os.getenv("APP_TITLE", "Envelope API")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

_cors_env = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")
CORS_ORIGINS = [o.strip() for o in _cors_env.split(",") if o.strip()]
