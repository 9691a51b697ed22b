"""Liquidity position data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .chain import ChainInfo
from .pool import ProtocolInfo, TokenInfo

_CONFIG = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

_ACTIVE_STATUSES = frozenset({"IN_RANGE", "OUT_RANGE"})


class PoolInfo(BaseModel):
    """Pool reference embedded in a position."""

    id: str
    pool_address: str = Field(..., alias="poolAddress")
    protocol: ProtocolInfo | None = None

    model_config = _CONFIG


class TokenWithValue(BaseModel):
    """Token balance with its USD valuation."""

    token: TokenInfo
    balance: str
    price: float
    value: float

    model_config = _CONFIG


class FeeInfo(BaseModel):
    pending: list[TokenWithValue] | None = None
    claimed: list[TokenWithValue] | None = None

    model_config = _CONFIG


class AprBreakdown(BaseModel):
    total_apr: float = Field(..., alias="totalApr")
    fee_apr: float = Field(..., alias="feeApr")
    farm_apr: float = Field(..., alias="farmApr")

    model_config = _CONFIG


class PositionPerformance(BaseModel):
    """Performance metrics of a position, in USD unless noted."""

    total_deposit_value: float = Field(..., alias="totalDepositValue")
    total_withdraw_value: float = Field(..., alias="totalWithdrawValue")
    impermanent_loss: float = Field(..., alias="impermanentLoss")
    pnl: float
    return_on_investment: float = Field(..., alias="returnOnInvestment")
    compare_to_hold: float | None = Field(None, alias="compareToHold")
    apr: AprBreakdown | None = None

    model_config = _CONFIG


class Position(BaseModel):
    """A wallet's stake in a pool, with price range and metrics."""

    id: str
    chain: ChainInfo | None = None
    pool: PoolInfo | None = None
    owner_address: str = Field(..., alias="ownerAddress")
    token_address: str = Field(..., alias="tokenAddress")
    token_id: str = Field(..., alias="tokenId")
    liquidity: str
    min_price: float = Field(..., alias="minPrice")
    max_price: float = Field(..., alias="maxPrice")
    current_position_value: float = Field(..., alias="currentPositionValue")
    status: str
    current_amounts: list[TokenWithValue] | None = Field(None, alias="currentAmounts")
    provided_amounts: list[TokenWithValue] | None = Field(None, alias="providedAmounts")
    trading_fee: FeeInfo | None = Field(None, alias="tradingFee")
    farming_reward: FeeInfo | None = Field(None, alias="farmingReward")
    performance: PositionPerformance | None = None

    model_config = _CONFIG

    def is_active(self) -> bool:
        return self.status.upper() in _ACTIVE_STATUSES

    def is_closed(self) -> bool:
        return self.status.upper() == "CLOSED"

    def total_value_estimate(self) -> float:
        """Sum of current token values, falling back to the reported position value."""
        if self.current_amounts is not None:
            return sum(amount.value for amount in self.current_amounts)
        return self.current_position_value
