#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from krystal.cloud import KrystalClient, KrystalError, PoolSortBy, PoolsQuery


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List top Krystal Cloud pools on one network")
    p.add_argument("chain_id", nargs="?", type=int, default=1)
    p.add_argument("limit", nargs="?", type=int, default=10)
    p.add_argument("sort", nargs="?", default="tvl", choices=["apr", "tvl", "volume", "fee"])
    p.add_argument("--protocol", default=None, help="Protocol key, e.g. uniswapv3")
    p.add_argument("--min-tvl", type=float, default=None)
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> int:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    query = PoolsQuery().chain_id(args.chain_id).sort_by(PoolSortBy.from_str(args.sort)).limit(args.limit)
    if args.protocol:
        query.protocol(args.protocol)
    if args.min_tvl is not None:
        query.min_tvl(args.min_tvl)

    try:
        async with KrystalClient.from_env() as client:
            pools = await client.get_pools(query)
    except KrystalError as e:
        print(f"Error: {e.user_message()}", file=sys.stderr)
        return 1

    print("=" * 78)
    print(f"Chain      : {args.chain_id}")
    print(f"Sorted by  : {args.sort}")
    print(f"Pools      : {len(pools)}")
    print("=" * 78)
    print(f"{'Pool':36} | {'TVL':>14} | {'Volume 24h':>14} | {'APR':>6}")
    print("-" * 78)
    for pool in pools:
        apr = pool.apr()
        apr_text = f"{apr:>6.2f}" if apr is not None else f"{'-':>6}"
        print(f"{pool.display_name()[:36]:36} | {pool.tvl:>14.2f} | {pool.volume_24h():>14.2f} | {apr_text}")
    print("=" * 78)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
