from typing import Optional, Sequence

from equity_statistics.models.equity import EquityPoint
from equity_statistics.models.summary import DrawdownEpisode

def max_drawdown_index(points: Sequence[EquityPoint]) -> int:
    """Index of the most negative drawdown; the earliest one wins ties, 0 when empty"""
    index = 0
    for i, point in enumerate(points):
        if point.drawdown < points[index].drawdown:
            index = i
    return index

def find_episode(points: Sequence[EquityPoint], trough_index: int) -> Optional[DrawdownEpisode]:
    """
    Locate the underwater episode containing the point at trough_index.

    The episode starts at the first point below the peak (the point right after
    the last zero drawdown before the trough, or the first point if the series
    opens underwater) and ends at the first zero drawdown at or after the trough,
    or at the last point if equity never recovers.

    :param points: Finalized equity points in chronological order
    :param trough_index: Index of the point the episode must contain
    :return: The episode, or None when the point is not underwater
    """
    if not points or points[trough_index].drawdown == 0:
        return None

    start = 0
    for i in range(trough_index, -1, -1):
        if points[i].drawdown == 0:
            start = i + 1
            break

    end = len(points) - 1
    recovered = False
    for i in range(trough_index, len(points)):
        if points[i].drawdown == 0:
            end = i
            recovered = True
            break

    return DrawdownEpisode(
        start_index=start,
        trough_index=trough_index,
        end_index=end,
        start=points[start].timestamp,
        trough=points[trough_index].timestamp,
        end=points[end].timestamp,
        depth=points[trough_index].drawdown,
        recovered=recovered
    )
