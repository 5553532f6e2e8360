"""Lenient accessors over decoded JSON values."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Union

from ..exceptions import ParsingError


def load_json(raw: Union[str, bytes]) -> Any:
    """
    Decode a JSON payload.

    Raises:
        ParsingError: The payload is not valid JSON
    """
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as e:
        raise ParsingError("Invalid JSON payload", str(e)) from e


def get_dict(node: Any, key: str) -> Dict[str, Any]:
    """Return ``node[key]`` when it is an object, else an empty dict."""
    if isinstance(node, dict):
        value = node.get(key)
        if isinstance(value, dict):
            return value
    return {}


def get_list(node: Any, key: str) -> List[Any]:
    """Return ``node[key]`` when it is an array, else an empty list."""
    if isinstance(node, dict):
        value = node.get(key)
        if isinstance(value, list):
            return value
    return []


def get_text(node: Any, key: str, default: Optional[str] = "") -> Optional[str]:
    """Return ``node[key]`` as a string; missing or null values give ``default``."""
    if not isinstance(node, dict):
        return default
    value = node.get(key)
    if value is None or isinstance(value, (dict, list)):
        return default
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_int(value: Any) -> Optional[int]:
    """Parse an integer from a JSON number or numeric string; None when impossible."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def to_float(value: Any) -> Optional[float]:
    """Parse a float from a JSON number or numeric string; None when impossible."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None
