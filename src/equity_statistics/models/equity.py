from datetime import datetime
from pydantic import BaseModel, ConfigDict

class EquityPoint(BaseModel):
    """Single point in the equity curve"""
    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    equity: float
    period_return: float = 0
    drawdown: float = 0

    @classmethod
    def zero(cls) -> "EquityPoint":
        """Zero-value point handed back when a lookup finds nothing"""
        return cls(timestamp=datetime.min, equity=0)
