"""Shared payload fixtures for unit tests."""

from __future__ import annotations

from typing import Any

import pytest

WALLET = "0x742d35Cc6634C0532925a3b844Bc9e7595f0bEb8"
POOL_ADDRESS = "0x88e6a0c2ddd26feeb64f039a2c41296fcb3f5640"


def make_token(symbol: str, address: str) -> dict[str, Any]:
    return {"address": address, "symbol": symbol, "name": symbol, "decimals": 18}


@pytest.fixture
def pool_payload() -> dict[str, Any]:
    return {
        "chain": {"id": 1, "name": "Ethereum"},
        "poolAddress": POOL_ADDRESS,
        "poolPrice": 3150.25,
        "protocol": {
            "key": "uniswapv3",
            "name": "Uniswap V3",
            "factoryAddress": "0x1f98431c8ad98523631ae4a59f267346ea31f984",
        },
        "feeTier": 500,
        "token0": make_token("USDC", "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"),
        "token1": make_token("WETH", "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"),
        "tvl": 200_000_000.0,
        "stats24h": {"volume": 40_000_000.0, "fee": 20_000.0, "apr": 12.5},
        "tickSpacing": 10,
    }


@pytest.fixture
def position_payload() -> dict[str, Any]:
    return {
        "id": "1-0xc36442b4a4522e871399cd717abdd847ab11fe88-12345",
        "chain": {"id": 1, "name": "Ethereum"},
        "pool": {"id": "pool-1", "poolAddress": POOL_ADDRESS},
        "ownerAddress": WALLET,
        "tokenAddress": "0xc36442b4a4522e871399cd717abdd847ab11fe88",
        "tokenId": "12345",
        "liquidity": "123456789",
        "minPrice": 2800.0,
        "maxPrice": 3500.0,
        "currentPositionValue": 15_000.0,
        "status": "IN_RANGE",
        "currentAmounts": [
            {
                "token": make_token("USDC", "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"),
                "balance": "5000000000",
                "price": 1.0,
                "value": 5000.0,
            },
            {
                "token": make_token("WETH", "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"),
                "balance": "3170000000000000000",
                "price": 3150.0,
                "value": 9985.5,
            },
        ],
        "performance": {
            "totalDepositValue": 14_000.0,
            "totalWithdrawValue": 0.0,
            "impermanentLoss": -120.0,
            "pnl": 985.5,
            "returnOnInvestment": 7.04,
            "apr": {"totalApr": 18.2, "feeApr": 15.0, "farmApr": 3.2},
        },
    }


@pytest.fixture
def transaction_payload() -> dict[str, Any]:
    return {
        "hash": "0xabc",
        "timestamp": 1_700_000_000,
        "type": "swap",
        "amount0": -1500.0,
        "amount1": 0.48,
    }
