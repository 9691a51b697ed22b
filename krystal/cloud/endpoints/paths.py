"""Path building helpers shared by endpoint definitions."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote


def segment(value: Any) -> str:
    """Percent-encode one path segment, including ``/`` and ``?``."""
    return quote(str(value), safe="")
