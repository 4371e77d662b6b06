class StatisticsError(Exception):
    """Base class for equity statistics errors"""

class EmptySeriesError(StatisticsError, ValueError):
    """Raised when an aggregate needs at least one equity point"""

class OutOfOrderError(StatisticsError, ValueError):
    """Raised when a point is older than the last one in the series"""
