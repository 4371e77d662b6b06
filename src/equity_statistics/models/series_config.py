from pydantic import BaseModel, Field, field_validator

class SeriesConfig(BaseModel):
    name: str = Field("equity", description="Label used in log messages")
    zero_equity_return: float = Field(1.0, description="Period return when the previous equity is zero")
    enforce_chronological: bool = Field(False, description="Reject points older than the last one")
    log_new_highs: bool = Field(True, description="Log every new high-water mark")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Series name must not be blank")
        return v
