from datetime import datetime, timezone

import pytest

from vitals_monitor.simulator import VitalsSimulator


@pytest.fixture
def now():
    return datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def simulator():
    return VitalsSimulator(seed=42)
