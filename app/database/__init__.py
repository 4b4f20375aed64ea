"""Database configuration, models, and session management."""

from app.database.config import engine, Base, get_db
from app.database import models

__all__ = ["engine", "Base", "get_db", "models"]
