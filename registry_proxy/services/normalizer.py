# registry_proxy/services/normalizer.py
# Caller query -> outbound OpenCorporates query (drops empties, injects api_token last)

from typing import Mapping, Optional
from urllib.parse import urlencode

TOKEN_PARAM = "api_token"
PAGINATION_KEYS = frozenset({"page", "per_page", "perpage", "limit", "offset"})


def _is_pagination_key(key: str) -> bool:
    return key.lower() in PAGINATION_KEYS


def build_upstream_params(
    query: Mapping[str, Optional[str]],
    api_token: str,
    exclude_pagination: bool = False,
) -> list[tuple[str, str]]:
    """Return the (key, value) pairs to forward upstream.

    Empty and missing values are dropped. A caller-supplied ``api_token`` is
    discarded and the server token is always appended as the final pair.
    """
    params = []
    for key, value in query.items():
        if value is None or value == "":
            continue
        if key == TOKEN_PARAM:
            continue
        if exclude_pagination and _is_pagination_key(key):
            continue
        params.append((key, str(value)))
    params.append((TOKEN_PARAM, api_token))
    return params


def build_query_string(
    query: Mapping[str, Optional[str]],
    api_token: str,
    exclude_pagination: bool = False,
) -> str:
    return urlencode(build_upstream_params(query, api_token, exclude_pagination))
