from equity_statistics.core import EmptySeriesError, EquitySeries, OutOfOrderError, StatisticsError
from equity_statistics.models import DrawdownEpisode, EquityPoint, SeriesConfig, StatisticsSummary
