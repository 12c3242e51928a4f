"""Build GET query strings from parameter mappings."""

from __future__ import annotations

from typing import Mapping


def create_querystring(parameters: Mapping[str, str]) -> str:
    """
    Serialize ``parameters`` as ``?k1=v1&k2=v2`` in ascending key order.

    Keys and values are written as-is (no URL escaping). An empty mapping
    yields ``"?"``.
    """
    pairs = [f"{key}={parameters[key]}" for key in sorted(parameters)]
    return "?" + "&".join(pairs)
