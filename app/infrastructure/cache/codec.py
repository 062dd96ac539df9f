"""JSON text codec for cached values.

Values are encoded to JSON text on write and decoded on read. Non-finite
floats are not valid JSON, so they are written as sentinel strings and
revived on read. Strings that would be mistaken for a sentinel, or that
already carry the escape prefix, are written with ``ESCAPE_PREFIX`` in
front and unescaped on read, so every other JSON value round-trips
unchanged.
"""

import json
import math
from typing import Any

INFINITY_SENTINEL = "__INFINITY__"
NEG_INFINITY_SENTINEL = "__NEG_INFINITY__"
NAN_SENTINEL = "__NAN__"
ESCAPE_PREFIX = "__STR__"

_REVIVED = {
    INFINITY_SENTINEL: math.inf,
    NEG_INFINITY_SENTINEL: -math.inf,
    NAN_SENTINEL: math.nan,
}


def _needs_escape(value: str) -> bool:
    return value in _REVIVED or value.startswith(ESCAPE_PREFIX)


def _replace_special(value: Any) -> Any:
    if isinstance(value, str):
        return ESCAPE_PREFIX + value if _needs_escape(value) else value
    if isinstance(value, float):
        if math.isnan(value):
            return NAN_SENTINEL
        if math.isinf(value):
            return INFINITY_SENTINEL if value > 0 else NEG_INFINITY_SENTINEL
        return value
    if isinstance(value, dict):
        return {key: _replace_special(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_replace_special(item) for item in value]
    return value


def _revive_special(value: Any) -> Any:
    if isinstance(value, str):
        if value.startswith(ESCAPE_PREFIX):
            return value[len(ESCAPE_PREFIX):]
        return _REVIVED.get(value, value)
    if isinstance(value, dict):
        return {key: _revive_special(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_revive_special(item) for item in value]
    return value


def encode_value(value: Any) -> str:
    """Encode a value to JSON text.

    Args:
        value: JSON-compatible value (dict, list, str, int, float, bool, None).

    Returns:
        JSON text.

    Raises:
        TypeError: If the value contains a non-JSON type.
    """
    return json.dumps(_replace_special(value), allow_nan=False, ensure_ascii=False)


def decode_value(text: str | bytes) -> Any:
    """Decode JSON text produced by ``encode_value``.

    Args:
        text: JSON text.

    Returns:
        Decoded value with non-finite floats restored.

    Raises:
        ValueError: If the text is not valid JSON.
    """
    return _revive_special(json.loads(text))
