"""Shared pytest configuration.

Points the application at SQLite before any ``app`` module builds its engine,
so importing ``app.main`` never needs a running PostgreSQL server.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test_classifieds.db")
os.environ.setdefault("APP_ENV", "test")
