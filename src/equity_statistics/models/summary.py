from datetime import datetime, timedelta
from typing import Optional
from pydantic import BaseModel

from equity_statistics.models.equity import EquityPoint

class DrawdownEpisode(BaseModel):
    """Underwater window around the deepest drawdown point"""
    start_index: int
    trough_index: int
    end_index: int
    start: datetime
    trough: datetime
    end: datetime
    depth: float
    recovered: bool

    @property
    def duration(self) -> timedelta:
        """Time from leaving the peak until recovery, or until the series ends"""
        return self.end - self.start

class StatisticsSummary(BaseModel):
    """Snapshot of every aggregate query on a series"""
    observation_count: int
    first_equity: Optional[float] = None
    last_equity: Optional[float] = None
    total_return: Optional[float] = None
    max_drawdown: float
    max_drawdown_time: datetime
    max_drawdown_duration: timedelta
    high_water_mark: EquityPoint
