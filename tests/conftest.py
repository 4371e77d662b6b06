from datetime import datetime, timedelta

import pytest

from equity_statistics import EquitySeries

START = datetime(2017, 9, 25)

def daily(equities, start=START):
    """Series built by recording one equity value per day"""
    series = EquitySeries()
    for i, equity in enumerate(equities):
        series.record(start + timedelta(days=i), equity)
    return series

@pytest.fixture
def empty_series() -> EquitySeries:
    return EquitySeries()

@pytest.fixture
def example_series() -> EquitySeries:
    """Peak on the 26th, trough on the 28th, recovery on the 29th"""
    return daily([100, 110, 105, 95, 110])
