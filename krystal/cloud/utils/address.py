"""Ethereum address helpers."""

import re

_ADDRESS_RE = re.compile(r"0x[0-9a-fA-F]{40}")


def is_valid_ethereum_address(address: str) -> bool:
    """Check for ``0x`` followed by exactly 40 hex characters."""
    return isinstance(address, str) and _ADDRESS_RE.fullmatch(address) is not None


def normalize_address(address: str) -> str:
    """Lowercase a valid address; return anything else unchanged."""
    if is_valid_ethereum_address(address):
        return address.lower()
    return address


def format_address(address: str, prefix_len: int = 6, suffix_len: int = 4) -> str:
    """Shorten an address for display, e.g. ``0x742d...3b82``."""
    if len(address) <= prefix_len + suffix_len + 3:
        return address
    return f"{address[:prefix_len]}...{address[-suffix_len:]}"
