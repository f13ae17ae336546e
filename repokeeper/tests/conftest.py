import pytest
from unittest.mock import patch
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from repokeeper.models.repository import Repository  # noqa: F401


@pytest.fixture
def db_engine():
    """
    Points the application at a fresh in-memory SQLite database for the
    duration of a test, with persistence enabled.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)

    with patch("repokeeper.config.db.engine", engine), patch(
        "repokeeper.config.db.STATELESS_MODE", False
    ), patch("repokeeper.utils.repository_service.STATELESS_MODE", False):
        yield engine

    engine.dispose()


@pytest.fixture
def stateless_mode():
    with patch("repokeeper.config.db.STATELESS_MODE", True), patch(
        "repokeeper.utils.repository_service.STATELESS_MODE", True
    ):
        yield
