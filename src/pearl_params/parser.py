"""Parse flat ``KEY = VALUE`` parameter responses into a mapping."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from .keys import DEFAULT_REGISTRY, KeyRegistry

logger = logging.getLogger(__name__)

SEPARATOR = "="


def parse(response: str, registry: Optional[KeyRegistry] = None) -> Dict[str, str]:
    """
    Parse a device parameter response into a key-ordered dict.

    Tokens are split on single spaces and ``=`` tokens are dropped. A key
    followed directly by another key gets an empty value. A value with no
    pending key is dropped, and so is a key left pending at the end of the
    input. Repeated keys keep the last value. Never raises.

    Args:
        response: Raw response text, e.g. ``"framesize = 1920x1080 audio = "``.
        registry: Key vocabulary to classify tokens with (default: built-in).

    Returns:
        Dict of key -> value, iterating in ascending key order.
    """
    if registry is None:
        registry = DEFAULT_REGISTRY
    result: Dict[str, str] = {}
    pending: Optional[str] = None

    for raw in response.split(" "):
        if raw == SEPARATOR:
            continue
        token = raw.strip()

        if not registry.is_key(token):
            if pending is None:
                logger.debug(f"Dropping value with no pending key: {token!r}")
                continue
            result[pending] = token
            pending = None
        elif pending is None:
            pending = token
        else:
            result[pending] = ""
            pending = token

    if pending is not None:
        logger.debug(f"Dropping trailing key with no value: {pending!r}")

    return dict(sorted(result.items()))
