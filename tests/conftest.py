"""Shared fixtures for the comingsoon test suite."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from comingsoon.config import Settings
from comingsoon.main import create_app
from comingsoon.services.registry import EmailRegistry

SECRET = "s3cret-token"
ORIGIN = "http://localhost:5173"


@pytest.fixture
def email_file(tmp_path: Path) -> Path:
    return tmp_path / "emails.txt"


@pytest.fixture
def registry(email_file: Path) -> EmailRegistry:
    reg = EmailRegistry(str(email_file))
    reg.load()
    return reg


@pytest.fixture
def settings(email_file: Path) -> Settings:
    return Settings(
        _env_file=None,
        SECRET_TOKEN=SECRET,
        HOST=ORIGIN,
        EMAIL_FILE_PATH=str(email_file),
    )


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))
