"""Blockchain network data model."""

from pydantic import BaseModel, ConfigDict


class ChainInfo(BaseModel):
    """Blockchain network supported by the API.

    Unknown response fields are kept as extra attributes.
    """

    id: int
    name: str
    logo: str | None = None
    explorer: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)
