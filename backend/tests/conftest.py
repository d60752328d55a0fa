"""Shared test configuration — point settings at SQLite before the app is imported."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./auto_ease_test.db")
os.environ.setdefault("APP_ENV", "test")
