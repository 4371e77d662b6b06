from equity_statistics.core.errors import EmptySeriesError, OutOfOrderError, StatisticsError
from equity_statistics.core.series import EquitySeries
