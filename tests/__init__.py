#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Skip tests that need a real PostgreSQL
    python -m pytest tests/ -v -m "not db"

    # Using unittest
    python -m unittest discover tests -v

Unit tests run against an in-memory SQLite database. The identity provider
and the generative service are replaced with the fakes in tests/mocks.
"""

import io
import os
import sys
from pathlib import Path
from typing import Optional

sys.path.insert(0, str(Path(__file__).parent.parent))

# PostgreSQL for tests marked ``db``
TEST_DB_URL = os.environ.get("TEST_DATABASE_URL")

SQLITE_MEMORY_URL = "sqlite:///:memory:"

VALID_TOKEN = "token-valid"
OTHER_TOKEN = "token-other"
TEST_SUBJECT_ID = "user-test-uid-123"
OTHER_SUBJECT_ID = "user-other-uid-456"


def auth_headers(token: str = VALID_TOKEN) -> dict:
    return {"Authorization": f"Bearer {token}"}


def make_pdf_bytes(pages: int = 1) -> bytes:
    """Build a small, valid PDF with blank pages."""
    from pypdf import PdfWriter

    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=200, height=200)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def build_test_database():
    """Create an in-memory database with all tables."""
    from database.database import DatabaseManager

    db = DatabaseManager(SQLITE_MEMORY_URL)
    db.create_tables()
    return db


def build_test_client(
    provider=None,
    verifier=None,
    rate_limit_default: Optional[str] = None,
    max_upload_bytes: Optional[int] = None,
):
    """
    Create an app wired to fakes and an in-memory database.

    Rate limiting is off unless ``rate_limit_default`` is given.

    Returns:
        (TestClient, AppContext)
    """
    from fastapi.testclient import TestClient

    from tests.mocks.service_mocks import FakeGenerativeProvider, FakeIdentityVerifier
    from web.backend.app import create_app
    from web.backend.app_context import AppContext
    from web.backend.config import AppConfig, DatabaseConfig, RateLimitConfig, UploadConfig

    config = AppConfig(
        database=DatabaseConfig(url=SQLITE_MEMORY_URL),
        rate_limit=RateLimitConfig(
            enabled=rate_limit_default is not None,
            default=rate_limit_default or "100 per 15 minutes"
        ),
    )
    if max_upload_bytes is not None:
        config.upload = UploadConfig(max_size_bytes=max_upload_bytes)

    context = AppContext(
        config=config,
        db=build_test_database(),
        identity_verifier=verifier or FakeIdentityVerifier(),
        generative_provider=provider or FakeGenerativeProvider(),
    )
    app = create_app(config, context=context)
    return TestClient(app, raise_server_exceptions=False), context
