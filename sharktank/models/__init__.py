"""
Models Package
The deal record and its composite id helpers.
"""

from .deal import Deal, compose_deal_id, parse_deal_id

__all__ = [
    "Deal",
    "compose_deal_id",
    "parse_deal_id",
]
