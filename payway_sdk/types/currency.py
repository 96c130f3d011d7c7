"""Currencies accepted by the PayWay gateway."""
from __future__ import annotations

from enum import Enum


class Currency(str, Enum):
    """ISO currency codes supported for payment links."""

    KHR = "KHR"
    USD = "USD"
