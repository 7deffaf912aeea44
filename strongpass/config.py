# strongpass/config.py
"""
Simple settings persistence for StrongPass.
Settings saved as JSON in %APPDATA%/StrongPass/config.json (Windows) or ~/.strongpass/config.json (fallback).
STRONGPASS_CONFIG overrides the location.
"""

import os
import json
import logging
from typing import Dict, Any, Optional

from .errors import InvalidLengthError
from .generator import GenerationOptions

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "default_length": 16,
    "min_length": 8,
    "max_length": 64,
    "include_lower": True,
    "include_upper": True,
    "include_digits": True,
    "include_symbols": True,
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "StrongPass")
    return os.path.join(os.path.expanduser("~"), ".strongpass")

def config_path() -> str:
    override = os.getenv("STRONGPASS_CONFIG")
    if override:
        return override
    return os.path.join(_appdata_dir(), "config.json")

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults, keeping only values of the expected type
    out = DEFAULTS.copy()
    for key, value in data.items():
        default = DEFAULTS.get(key)
        if key in DEFAULTS and type(value) is not type(default):
            logger.warning("ignoring config %s: %s must be %s", p, key, type(default).__name__)
            continue
        out[key] = value
    if not 1 <= out["min_length"] <= out["max_length"]:
        logger.warning("ignoring config %s: invalid length range", p)
        out["min_length"] = DEFAULTS["min_length"]
        out["max_length"] = DEFAULTS["max_length"]
    return out

def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> None:
    p = path or config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)

def default_options(cfg: Dict[str, Any]) -> GenerationOptions:
    return GenerationOptions(
        use_lower=bool(cfg.get("include_lower", True)),
        use_upper=bool(cfg.get("include_upper", True)),
        use_digits=bool(cfg.get("include_digits", True)),
        use_symbols=bool(cfg.get("include_symbols", True)),
    )

def check_length(length: Any, cfg: Dict[str, Any]) -> int:
    """Apply the caller-side length range; raises InvalidLengthError outside it."""
    lo = int(cfg.get("min_length", DEFAULTS["min_length"]))
    hi = int(cfg.get("max_length", DEFAULTS["max_length"]))
    if isinstance(length, bool) or not isinstance(length, int) or not lo <= length <= hi:
        raise InvalidLengthError(length, f"length must be between {lo} and {hi}, got {length!r}")
    return length
