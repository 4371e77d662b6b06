from datetime import datetime, timedelta

from equity_statistics.core.drawdown import find_episode, max_drawdown_index
from equity_statistics.models.equity import EquityPoint

DAYS = [datetime(2017, 9, 25) + timedelta(days=i) for i in range(5)]


def points(drawdowns):
    return [
        EquityPoint(timestamp=DAYS[i], equity=100, drawdown=dd)
        for i, dd in enumerate(drawdowns)
    ]


def test_max_drawdown_index_empty():
    assert max_drawdown_index([]) == 0


def test_max_drawdown_index_strictly_lower_wins():
    assert max_drawdown_index(points([0, -0.2, -0.1, -0.2])) == 1


def test_episode_from_prebuilt_points():
    episode = find_episode(points([0, 0, -0.0455, -0.1364, 0]), 3)

    assert episode.start == DAYS[2]
    assert episode.end == DAYS[4]
    assert episode.duration.total_seconds() / 3600 == 48


def test_episode_when_series_opens_underwater():
    episode = find_episode(points([-0.1, -0.3, -0.2, 0]), 1)

    assert episode.start_index == 0
    assert episode.end_index == 3
    assert episode.recovered is True


def test_no_episode_at_zero_drawdown():
    assert find_episode(points([0, 0]), 0) is None


def test_no_episode_when_empty():
    assert find_episode([], 0) is None
