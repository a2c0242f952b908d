"""Unit test fixtures.

Provides:
- Settings cache isolation between tests
- Call-counting callback stubs
- Sample wire values
"""

import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from okerr.config import get_settings  # noqa: E402

# ============================================================================
# Settings
# ============================================================================


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Reload settings for every test so env overrides take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# Callback Stubs
# ============================================================================


@pytest.fixture
def double() -> Mock:
    """Callback doubling its argument, counting calls."""
    return Mock(side_effect=lambda x: x * 2)


@pytest.fixture
def never_called() -> Mock:
    """Callback that fails the test if it is ever invoked."""
    return Mock(side_effect=AssertionError("callback must not be called"))


# ============================================================================
# Sample Data
# ============================================================================


@pytest.fixture
def polluted_ok() -> dict[str, Any]:
    """An Ok wire mapping carrying an injected extra key."""
    return {"Ok": 123, "isAdmin": True}


@pytest.fixture
def non_results() -> list[Any]:
    """Values that must never be recognised as a Result."""
    return [
        None,
        {},
        {"Ok": 1, "Err": 2},
        {"ok": 1},
        {"value": 1},
        [],
        ["Ok"],
        [("Ok", 1)],
        "Ok",
        0,
        1.5,
        True,
        object(),
    ]
