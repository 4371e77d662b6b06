from equity_statistics.models.equity import EquityPoint
from equity_statistics.models.series_config import SeriesConfig
from equity_statistics.models.summary import DrawdownEpisode, StatisticsSummary
