"""Position list query builder."""

from __future__ import annotations

from collections.abc import Iterable

from ..core.enums import PositionStatus
from ..utils.address import is_valid_ethereum_address
from .base import Params, QueryBuilder, render_value


class PositionsQuery(QueryBuilder):
    """Filters for the position list endpoint. The wallet is mandatory."""

    def __init__(self, wallet: str) -> None:
        self._wallet = wallet
        self._chain_id: int | None = None
        self._status: PositionStatus | None = None
        self._protocols: list[str] | None = None

    @property
    def wallet(self) -> str:
        return self._wallet

    def chain_id(self, chain_id: int) -> PositionsQuery:
        self._chain_id = chain_id
        return self

    def status(self, status: PositionStatus) -> PositionsQuery:
        self._status = status
        return self

    def protocols(self, protocols: Iterable[str]) -> PositionsQuery:
        self._protocols = list(protocols)
        return self

    def add_protocol(self, protocol: str) -> PositionsQuery:
        if self._protocols is None:
            self._protocols = []
        self._protocols.append(protocol)
        return self

    def rejection_reason(self) -> str | None:
        if not self._wallet:
            return "Wallet address cannot be empty"
        if not is_valid_ethereum_address(self._wallet):
            return "Invalid Ethereum address format"
        return None

    def to_params(self) -> Params:
        params: Params = [("wallet", self._wallet)]
        if self._chain_id is not None:
            params.append(("chainId", render_value(self._chain_id)))
        if self._status is not None and self._status.api_value is not None:
            params.append(("positionStatus", self._status.api_value))
        for protocol in self._protocols or []:
            params.append(("protocols", protocol))
        return params
