"""Pytest configuration and fixtures for datestr tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so datestr can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from datestr.core.date import DateStr  # noqa: E402
from datestr.format.spec import FormatSpec  # noqa: E402


@pytest.fixture
def independence_day() -> DateStr:
    """2023-07-04, used across formatting tests."""
    return DateStr(2023, 7, 4)


@pytest.fixture
def dd_mm_yyyy() -> FormatSpec:
    """The DD/MM/YYYY layout."""
    return FormatSpec.from_pattern("DD/MM/YYYY")
