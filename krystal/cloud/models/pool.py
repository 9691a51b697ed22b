"""Liquidity pool data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .chain import ChainInfo

_CONFIG = ConfigDict(frozen=True, extra="allow", populate_by_name=True)


class TokenInfo(BaseModel):
    """ERC-20 token metadata."""

    address: str
    symbol: str
    name: str
    decimals: int = Field(..., ge=0)
    logo: str | None = None

    model_config = _CONFIG


class ProtocolInfo(BaseModel):
    """DEX protocol a pool belongs to."""

    key: str
    name: str
    factory_address: str = Field(..., alias="factoryAddress")
    logo: str | None = None

    model_config = _CONFIG


class PoolStats(BaseModel):
    """Volume, fee and APR over one stats window."""

    volume: float
    fee: float
    apr: float

    model_config = _CONFIG


class IncentiveInfo(BaseModel):
    """Farming incentive attached to a pool."""

    incentive_type: str = Field(..., alias="incentiveType")
    token: TokenInfo
    amount_per_day: float = Field(..., alias="amountPerDay")
    daily_reward_usd: float = Field(..., alias="dailyRewardUsd")
    apr24h: float

    model_config = _CONFIG


class Pool(BaseModel):
    """Liquidity pool for a token pair under one protocol."""

    chain: ChainInfo | None = None
    address: str = Field(..., alias="poolAddress")
    pool_price: float = Field(..., alias="poolPrice")
    protocol: ProtocolInfo | None = None
    fee_tier: int = Field(..., alias="feeTier")
    token0: TokenInfo | None = None
    token1: TokenInfo | None = None
    tvl: float
    stats1h: PoolStats | None = None
    stats24h: PoolStats | None = None
    stats7d: PoolStats | None = None
    stats30d: PoolStats | None = None
    incentives: list[IncentiveInfo] | None = None

    model_config = _CONFIG

    def volume_24h(self) -> float:
        return self.stats24h.volume if self.stats24h else 0.0

    def apr(self) -> float | None:
        return self.stats24h.apr if self.stats24h else None

    def volume_tvl_ratio(self) -> float:
        """24h volume divided by TVL, 0.0 when either is unavailable."""
        if self.tvl > 0 and self.stats24h:
            return self.stats24h.volume / self.tvl
        return 0.0

    def is_high_activity(self) -> bool:
        """True when 24h volume is at least 10% of TVL."""
        return self.volume_tvl_ratio() >= 0.1

    def display_name(self) -> str:
        token0 = self.token0.symbol if self.token0 else "?"
        token1 = self.token1.symbol if self.token1 else "?"
        protocol = self.protocol.name if self.protocol else "Unknown"
        return f"{token0}/{token1} ({protocol}) Pool"
