"""
Component Test Layer Configuration

Structure:
    tests/component/
    ├── mocks/       Mock implementations
    └── test_*.py    One module per component

Usage:
    pytest tests/component -v
"""
import os
import sys

import pytest

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from core.config.email_config import EmailConfig
from tests.component.mocks import (
    MockEmailClient,
    MockEventBus,
    MockPostgresClient,
    MockProductionBasinRepository,
    MockRecipientDirectory,
    MockUserLookup,
)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_collection_modifyitems(config, items):
    """Mark everything under tests/component as a component test"""
    for item in items:
        if "/component/" in str(item.path):
            item.add_marker(pytest.mark.component)


# =============================================================================
# Mock Fixtures
# =============================================================================

@pytest.fixture
def mock_event_bus() -> MockEventBus:
    return MockEventBus()


@pytest.fixture
def mock_lookup() -> MockUserLookup:
    return MockUserLookup(existing_ids=[1, 2, 3, 4])


@pytest.fixture
def mock_repository() -> MockProductionBasinRepository:
    repo = MockProductionBasinRepository()
    repo.add_basin("b-1", "Bassin Centre-Ouest")
    repo.add_basin("b-2", "Bassin Sud")
    repo.add_user(1, "kouadio")
    repo.add_user(2, "yao")
    repo.add_user(3, "aya", basin_id="b-1")
    repo.add_user(4, "moussa", basin_id="b-2")
    return repo


@pytest.fixture
def mock_directory() -> MockRecipientDirectory:
    return MockRecipientDirectory()


@pytest.fixture
def mock_email_client() -> MockEmailClient:
    return MockEmailClient()


@pytest.fixture
def email_config() -> EmailConfig:
    return EmailConfig(
        resend_api_key="re_test",
        from_email="noreply@oncc.ci",
        from_name="ONCC",
        app_name="ONCC",
        frontend_url="https://app.oncc.ci",
        support_email="support@oncc.ci",
        support_phone="+225 27 20 00 00 00",
    )


@pytest.fixture
def mock_db() -> MockPostgresClient:
    return MockPostgresClient()
