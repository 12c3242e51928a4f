"""Recognized configuration keys of the device parameter API."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple

from jsonschema import Draft7Validator

logger = logging.getLogger(__name__)

KEY_GROUPS: Dict[str, Tuple[str, ...]] = {
    "touchscreen": (
        "touchscreen_enabled",
        "touchscreen_preview",
        "touchscreen_info",
        "touchscreen_settings",
        "touchscreen_recordctl",
        "touchscreen_timeout",
        "touchscreen_backlight",
    ),
    "http_server": (
        "http_usessl",
        "http_port",
        "http_sport",
    ),
    "access_control": (
        "allowips",
        "denyips",
    ),
    "system": (
        "description",
        "multicast_ip",
        "multicast_rate_limit",
    ),
    "firmware": (
        "frmcheck_enabled",
    ),
    "upnp": (
        "share_livestreams",
        "share_archive",
        "server_name",
    ),
    "broadcasting": (
        "bcast_disabled",
        "streamport",
        "rtsp_port",
    ),
    "encoder": (
        "framesize",
        "autoframesize",
        "fpslimit",
        "vbitrate",
        "vencpreset",
        "vprofile",
        "vkeyframeinterval",
        "slicemode",
        "qvalue",
        "codec",
        "audio",
        "audiopreset",
        "audiobitrate",
        "audiochannels",
    ),
    "external_encoder": (
        "type",
        "timelabel",
        "pip_layout",
        "bgcolor",
        "vgadvi",
        "keep_aspect_ratio",
    ),
    "channel_layout": (
        "active_layout",
    ),
    "stream_access": (
        "ac_override",
        "ac_viewerpwd",
        "ac_allowips",
        "ac_denyips",
    ),
    "publish": (
        "publish_enabled",
        "publish_type",
    ),
    "publish_rtsp": (
        "rtsp_url",
        "rtsp_transport",
        "rtsp_username",
        "rtsp_password",
    ),
    "publish_rtmp": (
        "rtmp_url",
        "rtmp_stream",
        "rtmp_username",
        "rtmp_password",
    ),
    "publish_livestream": (
        "livestream_channel",
        "livestream_username",
        "livestream_password",
    ),
    "publish_rtp": (
        "unicast_address",
        "unicast_aport",
        "unicast_vport",
    ),
    "publish_mpegts": (
        "unicast_address",
        "unicast_address",
        "unicast_mport",
        "sap",
        "sap_ip",
        "sap_group",
        "sap_channel_no",
    ),
    "metadata": (
        "title",
        "author",
        "copyright",
        "comment",
    ),
    "recorder": (
        "rec_enabled",
        "rec_sizelimit",
        "rec_timelimit",
        "rec_format",
        "rec_prefix",
        "rec_upnp",
    ),
}

# publish_type value -> destination settings group
PUBLISH_TYPE_GROUPS: Dict[str, str] = {
    "2": "publish_rtsp",
    "3": "publish_rtp",
    "4": "publish_mpegts",
    "5": "publish_mpegts",
    "6": "publish_rtmp",
    "7": "publish_rtmp",
    "8": "publish_livestream",
}

CONFIG_KEYS: Tuple[str, ...] = tuple(
    key for group in KEY_GROUPS.values() for key in group
)

EXTRA_KEYS_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "array",
    "items": {"type": "string", "pattern": r"^\s*\S+\s*$"},
}

_validator = Draft7Validator(EXTRA_KEYS_SCHEMA)


class KeyRegistry:
    """
    Read-only set of configuration key names.

    Membership is an exact, case-sensitive match. Extra keys extend the
    built-in vocabulary; they are not assigned to any group.
    """

    def __init__(self, extra_keys: Iterable[str] = ()) -> None:
        self._keys: FrozenSet[str] = frozenset(CONFIG_KEYS).union(extra_keys)
        self._groups: Dict[str, str] = {}
        for group, keys in KEY_GROUPS.items():
            for key in keys:
                self._groups.setdefault(key, group)

    def is_key(self, token: str) -> bool:
        return token in self._keys

    def __contains__(self, token: object) -> bool:
        return token in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def keys(self) -> FrozenSet[str]:
        return self._keys

    def group_of(self, key: str) -> Optional[str]:
        """Return the first group listing ``key``, or None for extra/unknown keys."""
        return self._groups.get(key)

    def keys_for_publish_type(self, publish_type: str) -> Tuple[str, ...]:
        group = PUBLISH_TYPE_GROUPS.get(publish_type.strip())
        if group is None:
            return ()
        return tuple(dict.fromkeys(KEY_GROUPS[group]))


DEFAULT_REGISTRY = KeyRegistry()


def is_key(token: str) -> bool:
    """Check whether ``token`` is one of the built-in configuration keys."""
    return DEFAULT_REGISTRY.is_key(token)


def validate_extra_keys(payload: Any) -> None:
    errors = sorted(_validator.iter_errors(payload), key=lambda e: list(e.path))
    if errors:
        messages = ", ".join(error.message for error in errors)
        raise ValueError(f"extra keys validation failed: {messages}")


def load_extra_keys(path: Path) -> Tuple[str, ...]:
    with Path(path).open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    validate_extra_keys(data)
    keys = tuple(entry.strip() for entry in data)
    logger.info(f"Loaded {len(keys)} extra keys from {path}")
    return keys
