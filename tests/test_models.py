from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from equity_statistics import DrawdownEpisode, EquityPoint, SeriesConfig


def test_zero_point():
    zero = EquityPoint.zero()

    assert zero.timestamp == datetime.min
    assert zero.equity == 0
    assert zero == EquityPoint.zero()


def test_point_requires_timestamp():
    with pytest.raises(ValidationError):
        EquityPoint(equity=100)


def test_point_rejects_non_numeric_equity():
    with pytest.raises(ValidationError):
        EquityPoint(timestamp=datetime(2017, 9, 25), equity="lots")


def test_config_defaults():
    config = SeriesConfig()

    assert config.zero_equity_return == 1.0
    assert config.enforce_chronological is False


def test_config_rejects_blank_name():
    with pytest.raises(ValidationError):
        SeriesConfig(name="  ")


def test_episode_duration():
    start = datetime(2017, 9, 27)
    episode = DrawdownEpisode(
        start_index=2, trough_index=3, end_index=4,
        start=start, trough=start + timedelta(days=1), end=start + timedelta(days=2),
        depth=-0.1364, recovered=True
    )

    assert episode.duration == timedelta(hours=48)
