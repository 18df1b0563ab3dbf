"""Shared pytest fixtures.

Environment variables are set before any storefront module reads settings,
so the module-level FastAPI app can be imported by API tests.
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("JWT_SECRET", "test-access-secret-0123456789abcdef")
os.environ.setdefault("JWT_REFRESH_SECRET", "test-refresh-secret-0123456789abcdef")
os.environ.setdefault("AES_SECRET_KEY", "0123456789abcdef0123456789abcdef")
os.environ.setdefault("BCRYPT_ROUNDS", "10")
os.environ.setdefault("LOG_JSON", "true")

from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402

from storefront.application.services import AuthService  # noqa: E402
from storefront.infrastructure.persistence import InMemoryUserRepository  # noqa: E402
from storefront.infrastructure.security import (  # noqa: E402
    BcryptPasswordService,
    JWTService,
)
from tests.utils.factories import ACCESS_SECRET, REFRESH_SECRET  # noqa: E402


@pytest.fixture
def mock_logger():
    """LoggerProtocol double; bind() returns the same mock."""
    logger = Mock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture(scope="session")
def password_service():
    # Lowest allowed cost keeps bcrypt tests fast
    return BcryptPasswordService(cost_factor=10)


@pytest.fixture
def token_service():
    return JWTService(secret_key=ACCESS_SECRET, refresh_secret_key=REFRESH_SECRET)


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def auth_service(user_repo, password_service, token_service, mock_logger):
    """AuthService wired with real adapters and an in-memory store."""
    return AuthService(
        user_repo=user_repo,
        password_service=password_service,
        token_service=token_service,
        logger=mock_logger,
    )
