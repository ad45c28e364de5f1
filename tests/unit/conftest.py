"""
Unit Test Layer Configuration

Pure functions and models only; no I/O, no mocks of external services.
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))


def pytest_collection_modifyitems(config, items):
    """Mark everything under tests/unit as a unit test"""
    for item in items:
        if "/unit/" in str(item.path):
            item.add_marker(pytest.mark.unit)
