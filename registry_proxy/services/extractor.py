"""
Path queries over parsed JSON, backed by jsonpath-ng.

Used to pull entity lists out of OpenCorporates payloads whose wrappers sit
at varying depths::

    $.results.company                      child keys
    $.results.officers..officer            any ``officer`` key below ``officers``
    $.results.companies[0].company         list index
    $.results.companies[*]                 every list element

``..`` matches come back in depth-first pre-order: a node's own match
before the matches inside its children. Missing keys, wrong types and
out-of-range indexes produce no match; only a malformed expression raises
(``jsonpath_ng.exceptions.JSONPathError``, when it is compiled).
"""

from functools import lru_cache
from typing import Any

from jsonpath_ng import parse
from jsonpath_ng.jsonpath import JSONPath


@lru_cache(maxsize=128)
def compile_path(expression: str) -> JSONPath:
    return parse(expression)


def query(data: Any, expression: str) -> list:
    """All matches of ``expression`` in ``data``; empty when nothing matches."""
    return [match.value for match in compile_path(expression).find(data)]


def first(data: Any, expression: str, default: Any = None) -> Any:
    matches = query(data, expression)
    return matches[0] if matches else default
