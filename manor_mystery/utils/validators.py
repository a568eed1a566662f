from typing import Any, Dict, List, Optional

from manor_mystery.errors import WorldDataError


def ensure_keys(d: Any, keys: List[str], ctx: str = ""):
    if not isinstance(d, dict):
        raise WorldDataError(f"Expected a mapping in {ctx or 'structure'}, got {type(d).__name__}")
    for k in keys:
        if k not in d:
            raise WorldDataError(f"Missing key '{k}' in {ctx or 'structure'}")


def optional_text(d: Dict[str, Any], key: str, ctx: str = "") -> Optional[str]:
    value = d.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise WorldDataError(f"'{key}' in {ctx or 'structure'} must be non-empty text")
    return value.strip()


def required_text(d: Dict[str, Any], key: str, ctx: str = "") -> str:
    value = optional_text(d, key, ctx)
    if value is None:
        raise WorldDataError(f"'{key}' in {ctx or 'structure'} cannot be empty")
    return value
