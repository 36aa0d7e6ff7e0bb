import pytest

from datetime import date


@pytest.fixture(scope="session")
def today() -> date:
    """
    Fixed reference date so that ages and times since diagnosis are stable.
    """
    return date(2025, 6, 15)


@pytest.fixture(scope="session")
def today_text() -> str:
    return "15/06/2025"
