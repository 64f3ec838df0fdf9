"""JSON encoding of violation reports and decoding of settings files.

orjson is used when installed; the ``json`` module is the fallback.
"""

from __future__ import annotations

try:
    import orjson  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    orjson = None  # type: ignore[assignment]

import json


def json_dumps(data: object, indent: bool = False) -> str:
    """Encode violation records for ``check --format json``.

    Args:
        data: Records as produced by ``FileReport.records``: a list of
            dicts holding path, position, message and fixability.
        indent: Pretty-print with two-space indentation.

    Returns:
        The encoded records; non-ASCII paths are kept as is.
    """

    if orjson is not None:
        option = orjson.OPT_INDENT_2 if indent else 0
        return orjson.dumps(data, option=option).decode()
    return json.dumps(data, ensure_ascii=False, indent=2 if indent else None)


def json_loads(data: str | bytes) -> object:
    """Decode the content of a ``.json`` settings file.

    Args:
        data: File content as ``str`` or UTF-8 ``bytes``.

    Returns:
        The decoded value; ``load_settings`` rejects anything but a mapping.
    """

    if orjson is not None:
        return orjson.loads(data)
    if isinstance(data, (bytes, bytearray)):
        return json.loads(data.decode("utf-8"))
    return json.loads(data)
