"""Linking pipeline settings.

Settings are an explicit value passed into every entry point. They can come from
keyword arguments, a persisted JSON blob or ``ZETTEL_*`` environment variables
(``.env`` files are honoured through python-dotenv). Bad values never raise:
each field falls back to its default and the problem is logged.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from typing import Any, Callable, Dict, Mapping

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}

# Persisted settings historically used camelCase keys.
_CAMEL_ALIASES = {
    "enabled": "enabled",
    "autoLinkKeywords": "auto_link_keywords",
    "highlightBidirectional": "highlight_bidirectional",
    "showBacklinks": "show_backlinks",
    "keywordMinLength": "keyword_min_length",
    "graphNodeThreshold": "graph_node_threshold",
    "cacheTtlSeconds": "cache_ttl_seconds",
    "basePath": "base_path",
}


@dataclass(frozen=True)
class ZettelConfig:
    enabled: bool = True
    auto_link_keywords: bool = False
    highlight_bidirectional: bool = True
    show_backlinks: bool = True
    keyword_min_length: int = 3
    graph_node_threshold: int = 50
    cache_ttl_seconds: int = 300
    base_path: str = ""

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "ZettelConfig":
        defaults = cls()
        values: Dict[str, Any] = {}
        known = {item.name: item for item in fields(cls)}
        for key, value in raw.items():
            name = _CAMEL_ALIASES.get(key, key)
            if name not in known:
                logger.debug("Ignoring unknown setting %r", key)
                continue
            default = getattr(defaults, name)
            try:
                values[name] = _coerce(value, default)
            except (TypeError, ValueError):
                logger.warning(
                    "Invalid value %r for setting %r, using default %r", value, key, default
                )
        return cls(**values)

    @classmethod
    def from_json(cls, text: str) -> "ZettelConfig":
        try:
            payload = json.loads(text)
        except (TypeError, json.JSONDecodeError) as error:
            logger.warning("Corrupted settings blob, falling back to defaults: %s", error)
            return cls()
        if not isinstance(payload, dict):
            logger.warning("Settings blob is not an object, falling back to defaults")
            return cls()
        return cls.from_mapping(payload)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(environ: Mapping[str, str] | None = None) -> ZettelConfig:
    """Build settings from ``ZETTEL_<FIELD>`` environment variables."""
    if environ is None:
        load_dotenv()
        environ = os.environ
    raw: Dict[str, Any] = {}
    for item in fields(ZettelConfig):
        env_name = f"ZETTEL_{item.name.upper()}"
        if env_name in environ:
            raw[item.name] = environ[env_name]
    return ZettelConfig.from_mapping(raw)


def _coerce(value: Any, default: Any) -> Any:
    converter: Callable[[Any], Any]
    if isinstance(default, bool):
        converter = _to_bool
    elif isinstance(default, int):
        converter = _to_non_negative_int
    else:
        converter = str
    return converter(value)


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValueError(f"not a boolean: {value!r}")


def _to_non_negative_int(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("booleans are not counts")
    number = int(value)
    if number < 0:
        raise ValueError(f"negative value: {number}")
    return number
