"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - component/  : Component tests (mocked dependencies: DB, bus, e-mail, HTTP)
    - unit/       : Unit tests (pure functions, no I/O)
"""
import os
import sys
from typing import Any, Dict, List

import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

os.environ.setdefault("ENV", "testing")


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def user_ref() -> Dict[str, Any]:
    """User who performed an action (camelCase, as on the wire)"""
    return {"id": "u-1", "username": "admin", "fullName": "Awa Koné"}


@pytest.fixture
def activated_by() -> Dict[str, Any]:
    return {"id": "u-1", "fullName": "Awa Koné"}


@pytest.fixture
def campaign_summary() -> Dict[str, Any]:
    return {"id": "c-1", "code": "2025-2026", "startDate": "01/10/2025", "endDate": "30/09/2026"}


@pytest.fixture
def store_details() -> Dict[str, Any]:
    return {"id": "s-1", "name": "Magasin Abidjan Port", "code": "MAG-001", "storeType": "EXPORT"}


# =============================================================================
# Assertion Helpers
# =============================================================================

class AssertionHelpers:
    """Custom assertion helpers for tests"""

    @staticmethod
    def assert_http_success(response, expected_status: int = 200):
        """Assert HTTP response is successful"""
        assert response.status_code == expected_status, \
            f"Expected {expected_status}, got {response.status_code}: {response.text}"

    @staticmethod
    def assert_has_fields(data: Dict, fields: List[str]):
        """Assert dict has required fields"""
        missing = [f for f in fields if f not in data]
        assert not missing, f"Missing fields: {missing}"


@pytest.fixture
def assertions() -> AssertionHelpers:
    """Provide assertion helpers"""
    return AssertionHelpers()


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line("markers", "component: Component tests")
    config.addinivalue_line("markers", "unit: Unit tests")
