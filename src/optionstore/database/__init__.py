"""
Database module for optionstore.

Backs the database storage adapter with a SQLite file managed through SQLAlchemy.
"""

from .models import Base, StoredOption
from .connection import DatabaseManager

__all__ = [
    "Base",
    "StoredOption",
    "DatabaseManager",
]
