"""
Pearl parameter adapter

Provides:
- Key registry (KeyRegistry, is_key) — recognized configuration key names
- Response parser (parse) — flat ``KEY = VALUE`` text to a key-ordered dict
- Query encoder (create_querystring) — dict to ``?k=v&...`` GET query string
"""

from .keys import CONFIG_KEYS, DEFAULT_REGISTRY, KEY_GROUPS, KeyRegistry, is_key, load_extra_keys
from .parser import parse
from .querystring import create_querystring
from .config import AdapterConfig, build_registry, load_config
from .logging_setup import configure_logging

__all__ = [
    'CONFIG_KEYS', 'DEFAULT_REGISTRY', 'KEY_GROUPS', 'KeyRegistry',
    'is_key', 'load_extra_keys',
    'parse',
    'create_querystring',
    'AdapterConfig', 'build_registry', 'load_config',
    'configure_logging',
]
