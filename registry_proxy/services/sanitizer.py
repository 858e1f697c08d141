# registry_proxy/services/sanitizer.py
# Strips opencorporates_url from upstream payloads before anything is extracted

from typing import Any

SENSITIVE_KEY = "opencorporates_url"


def remove_key(data: Any, key: str) -> Any:
    """Delete ``key`` from every dict nested anywhere in ``data``.

    Mutates ``data`` in place and returns it. Lists are walked in index
    order; for a dict the key is removed first, then each remaining value is
    visited. Anything that is not a dict or list is returned as-is.
    """
    if isinstance(data, list):
        for item in data:
            remove_key(item, key)
    elif isinstance(data, dict):
        data.pop(key, None)
        for value in data.values():
            remove_key(value, key)
    return data


def sanitize(data: Any) -> Any:
    return remove_key(data, SENSITIVE_KEY)
