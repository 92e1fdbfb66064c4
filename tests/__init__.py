#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests run against an in-memory SQLite database, no server required:

    # Run all tests
    python -m pytest tests/ -v

    # Run only pure unit tests (no database)
    python -m pytest tests/ -v -m "not db"

    # Using unittest (pure unit tests only)
    python -m unittest discover tests -v
"""

import os

# The app resolves its database lazily; keep it away from any real server.
os.environ.setdefault("DATABASE_URL", "sqlite://")
