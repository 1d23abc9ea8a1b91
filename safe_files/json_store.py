from __future__ import annotations

import json
from typing import Any


def dump_json(payload: Any, *, indent: int | None = 2, sort_keys: bool = False) -> str:
    """
    Serialize ``payload`` to ASCII-only JSON text.

    Non-ASCII characters (lone surrogates included) are written as ``\\u``
    escapes, so the result always encodes cleanly.

    Raises TypeError for unsupported types (sets, arbitrary objects) and
    ValueError for circular references.
    """
    return json.dumps(payload, indent=indent, sort_keys=sort_keys)


def parse_json(raw: str | bytes, encoding: str = "utf-8") -> Any:
    """
    Parse JSON text, decoding ``raw`` first when it is bytes.

    Undecodable bytes, empty input and malformed documents all raise ValueError
    (LookupError for an unknown encoding).
    """
    if isinstance(raw, bytes):
        raw = raw.decode(encoding)
    return json.loads(raw)
