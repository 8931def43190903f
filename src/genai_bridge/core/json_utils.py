"""
Fast JSON Utilities
===================

Uses the fastest available JSON library:
1. orjson (Rust-based, fastest)
2. ujson (C-based, fast)
3. stdlib json (fallback)

Every backend raises a ``ValueError`` subclass on malformed input, so callers
only need to catch ``JSONDecodeError`` from this module.
"""

import json as _stdlib_json
from typing import Any

try:
    import orjson

    _orjson_available = True
except ImportError:
    _orjson_available = False

try:
    import ujson  # type: ignore[import-untyped]

    _ujson_available = True
except ImportError:
    _ujson_available = False

JSONDecodeError = ValueError


def loads(s: str | bytes) -> Any:
    """
    Deserialize a JSON document.

    Args:
        s: JSON string or bytes

    Returns:
        Deserialized Python object

    Raises:
        JSONDecodeError: If the document is not valid JSON
    """
    if _orjson_available:
        return orjson.loads(s)

    elif _ujson_available:
        return ujson.loads(s)

    else:
        if isinstance(s, bytes):
            s = s.decode("utf-8")
        return _stdlib_json.loads(s)
