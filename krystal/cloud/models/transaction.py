"""Transaction data model."""

import time

from pydantic import BaseModel, ConfigDict, Field


class Transaction(BaseModel):
    """Pool or position transaction (swap, mint, burn, ...)."""

    hash: str
    timestamp: int = Field(..., ge=0)
    transaction_type: str = Field(..., alias="type")
    amount0: float
    amount1: float

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    def age_seconds(self) -> int:
        return max(0, int(time.time()) - self.timestamp)

    def is_recent(self) -> bool:
        """True when the transaction happened within the last hour."""
        return self.age_seconds() < 3600
