"""Shared pytest configuration."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "complaint_desk_test.db"
os.environ.setdefault("DATABASE_URL", f"sqlite:///{TEST_DB_PATH}")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("ACCESS_TOKEN_EXPIRE_MINUTES", "30")
os.environ.setdefault("NOTIFICATION_MARK_READ_DELAY_SECONDS", "0.05")
os.environ.pop("OPENAI_API_KEY", None)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
