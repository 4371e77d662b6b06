import logging
from typing import Optional

import pandas as pd

from equity_statistics.core.series import EquitySeries
from equity_statistics.models.series_config import SeriesConfig

FRAME_COLUMNS = ['timestamp', 'equity', 'period_return', 'drawdown']

def to_frame(series: EquitySeries) -> pd.DataFrame:
    """
    Convert a series to a DataFrame indexed by timestamp

    :param series: Equity series to convert
    :return: DataFrame with equity, period_return and drawdown columns
    """
    return pd.DataFrame([{
        'timestamp': p.timestamp,
        'equity': p.equity,
        'period_return': p.period_return,
        'drawdown': p.drawdown
    } for p in series], columns=FRAME_COLUMNS).set_index('timestamp')

def series_from_pandas(
    equity: pd.Series,
    config: Optional[SeriesConfig] = None,
    logger: Optional[logging.Logger] = None
) -> EquitySeries:
    """
    Build an equity series by appending each value of a time-indexed Series

    Rows are appended in index order as given; nothing is sorted.

    :param equity: Equity values indexed by timestamp
    :param config: Series configuration
    :param logger: Optional custom logger
    :return: Populated equity series
    """
    if not isinstance(equity.index, pd.DatetimeIndex):
        raise TypeError("Equity values must be indexed by a DatetimeIndex")

    series = EquitySeries(config=config, logger=logger)
    for timestamp, value in equity.items():
        series.record(timestamp.to_pydatetime(), float(value))
    return series
