#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import sys

from krystal.cloud import KrystalClient, KrystalError, PositionsQuery, PositionStatus
from krystal.cloud.utils import format_address


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Show a wallet's liquidity positions")
    p.add_argument("wallet")
    p.add_argument("status", nargs="?", default="OPEN", choices=["OPEN", "CLOSED", "ALL"])
    p.add_argument("--chain-id", type=int, default=None)
    return p.parse_args()


async def main() -> int:
    args = parse_args()
    query = PositionsQuery(args.wallet).status(PositionStatus[args.status])
    if args.chain_id is not None:
        query.chain_id(args.chain_id)

    try:
        async with KrystalClient.from_env() as client:
            positions = await client.get_positions(query)
    except KrystalError as e:
        print(f"Error: {e.user_message()}", file=sys.stderr)
        return 1

    print("=" * 65)
    print(f"Wallet     : {format_address(args.wallet)}")
    print(f"Status     : {args.status}")
    print(f"Positions  : {len(positions)}")
    print("=" * 65)
    for position in positions:
        pnl = position.performance.pnl if position.performance else 0.0
        print(
            f"{position.id[:20]:20} | {position.status:10} | "
            f"{position.total_value_estimate():>12.2f} | {pnl:>10.2f}"
        )
    print("=" * 65)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
