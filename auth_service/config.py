"""Auth Service — settings loaded from the environment (and ../.env)."""

import os

from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(__file__), "..", ".env"))

SECRET_KEY = os.getenv("SECRET_KEY")
if not SECRET_KEY:
    raise RuntimeError("SECRET_KEY environment variable is not set. Add it to your .env file.")

TOKEN_EXPIRY_SECONDS = int(os.getenv("TOKEN_EXPIRY_SECONDS", 86400))  # 24h default

DATABASE_PATH = os.getenv("AUTH_DB_PATH", os.path.join(os.path.dirname(__file__), "auth.db"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

PORT = int(os.getenv("PORT", 8001))
