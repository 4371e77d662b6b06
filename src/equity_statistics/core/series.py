import logging
from datetime import datetime, timedelta
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from equity_statistics.core.drawdown import find_episode, max_drawdown_index
from equity_statistics.core.errors import EmptySeriesError, OutOfOrderError
from equity_statistics.models.equity import EquityPoint
from equity_statistics.models.series_config import SeriesConfig
from equity_statistics.models.summary import DrawdownEpisode, StatisticsSummary

class EquitySeries:
    def __init__(
        self,
        config: Optional[SeriesConfig] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Ordered equity curve with a running high-water mark.

        Points are appended by a single producer in chronological order; each
        append freezes the point's period return and drawdown. Queries scan the
        points on demand and never mutate them.

        :param config: Series configuration
        :param logger: Optional custom logger
        """
        self.config = config or SeriesConfig()
        self.logger = logger or logging.getLogger(__name__)

        self._points: List[EquityPoint] = []
        self._high = EquityPoint.zero()

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[EquityPoint]:
        return iter(self._points)

    def __bool__(self) -> bool:
        return bool(self._points)

    @property
    def observations(self) -> Tuple[EquityPoint, ...]:
        return tuple(self._points)

    @property
    def high_water_mark(self) -> EquityPoint:
        """Point with the highest equity so far; the zero point before any append"""
        return self._high

    def append(self, point: EquityPoint) -> EquityPoint:
        """
        Finalize a raw point against the current state and add it to the series.

        Only timestamp and equity are read from the incoming point; period return
        and drawdown are computed here against the last point and the high-water
        mark as they stood before this call.

        :param point: Point carrying timestamp and equity
        :return: The finalized point as stored
        """
        self._check_order(point)

        if self._points:
            point = point.model_copy(update={
                'period_return': self._calc_period_return(point),
                'drawdown': self._calc_drawdown(point)
            })
        else:
            point = point.model_copy(update={'period_return': 0.0, 'drawdown': 0.0})

        self._points.append(point)

        if point.equity > self._high.equity:
            self._high = point
            if self.config.log_new_highs:
                self.logger.debug(f"{self.config.name}: new high-water mark {point.equity} at {point.timestamp}")

        self.logger.debug(
            f"{self.config.name}: appended equity {point.equity} "
            f"(return {point.period_return:.4f}, drawdown {point.drawdown:.4f})"
        )
        return point

    def record(self, timestamp: datetime, equity: float) -> EquityPoint:
        """Build a raw point and append it"""
        return self.append(EquityPoint(timestamp=timestamp, equity=equity))

    def extend(self, points: Iterable[EquityPoint]) -> List[EquityPoint]:
        """Append points in order, returning the finalized ones"""
        return [self.append(point) for point in points]

    def reset(self):
        """Drop all points and the high-water mark"""
        self._points = []
        self._high = EquityPoint.zero()
        self.logger.info(f"{self.config.name}: series reset")

    def _check_order(self, point: EquityPoint):
        if not self.config.enforce_chronological or not self._points:
            return
        last = self._points[-1]
        if point.timestamp < last.timestamp:
            raise OutOfOrderError(
                f"{self.config.name}: point at {point.timestamp} is older than last point at {last.timestamp}"
            )

    def _calc_period_return(self, point: EquityPoint) -> float:
        prev = self._points[-1]
        # moving away from zero equity counts as a full gain
        if prev.equity == 0:
            return float(self.config.zero_equity_return)
        return (point.equity - prev.equity) / prev.equity

    def _calc_drawdown(self, point: EquityPoint) -> float:
        # no peak established yet
        if self._high.equity == 0:
            return 0.0
        drawdown = (point.equity - self._high.equity) / self._high.equity
        return min(drawdown, 0.0)

    def first_observation(self) -> Tuple[EquityPoint, bool]:
        if not self._points:
            return EquityPoint.zero(), False
        return self._points[0], True

    def last_observation(self) -> Tuple[EquityPoint, bool]:
        if not self._points:
            return EquityPoint.zero(), False
        return self._points[-1], True

    def total_return(self) -> float:
        """
        Fractional change from the first to the last equity.

        A zero first equity yields inf or nan under IEEE division instead of
        raising.

        :return: (last - first) / first
        """
        first, ok = self.first_observation()
        if not ok:
            raise EmptySeriesError("could not calculate total return, no equity points found")
        last, _ = self.last_observation()

        if first.equity == 0:
            self.logger.warning(f"{self.config.name}: first equity is zero, total return is undefined")

        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float64(last.equity - first.equity) / np.float64(first.equity))

    def max_drawdown_point(self) -> Tuple[int, EquityPoint]:
        if not self._points:
            return 0, EquityPoint.zero()
        index = max_drawdown_index(self._points)
        return index, self._points[index]

    def max_drawdown(self) -> float:
        _, point = self.max_drawdown_point()
        return point.drawdown

    def max_drawdown_time(self) -> datetime:
        _, point = self.max_drawdown_point()
        return point.timestamp

    def max_drawdown_episode(self) -> Optional[DrawdownEpisode]:
        """Peak-exit to recovery window around the deepest drawdown, None if never underwater"""
        if len(self._points) < 2:
            return None
        index, _ = self.max_drawdown_point()
        return find_episode(self._points, index)

    def max_drawdown_duration(self) -> timedelta:
        episode = self.max_drawdown_episode()
        if episode is None:
            return timedelta(0)
        return episode.duration

    def returns(self) -> np.ndarray:
        """Period returns as an array, one per point"""
        return np.array([p.period_return for p in self._points], dtype=float)

    def drawdowns(self) -> np.ndarray:
        """Drawdowns as an array, one per point"""
        return np.array([p.drawdown for p in self._points], dtype=float)

    def summary(self) -> StatisticsSummary:
        first, ok = self.first_observation()
        last, _ = self.last_observation()
        return StatisticsSummary(
            observation_count=len(self._points),
            first_equity=first.equity if ok else None,
            last_equity=last.equity if ok else None,
            total_return=self.total_return() if ok else None,
            max_drawdown=self.max_drawdown(),
            max_drawdown_time=self.max_drawdown_time(),
            max_drawdown_duration=self.max_drawdown_duration(),
            high_water_mark=self._high
        )
