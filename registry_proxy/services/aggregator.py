# registry_proxy/services/aggregator.py
# Assembles the outward JSON envelopes: search lists, single entities with related lists, errors

from typing import Any, Optional

_MISSING = object()


def search_envelope(items: list, query: Optional[str]) -> dict:
    return {
        "success": True,
        "count": len(items),
        "data": items,
        "query": query,
    }


def entity_envelope(primary_key: str, primary: Any, related: dict, **identifiers) -> dict:
    """Single-entity body: the record, its related lists and their counts.

    ``identifiers`` (path parameters such as ``company_number``) are echoed at
    the top level next to ``data``.
    """
    data = {primary_key: primary}
    data.update(related)
    data["counts"] = {name: len(items) for name, items in related.items()}
    envelope = {"success": True, "data": data}
    envelope.update(identifiers)
    return envelope


def error_envelope(
    message: str,
    data: Any = _MISSING,
    error: Optional[str] = None,
    include_detail: bool = False,
) -> dict:
    envelope = {"success": False, "message": message}
    if data is not _MISSING:
        envelope["data"] = data
    # internals only leak in development
    if include_detail and error:
        envelope["error"] = error
    return envelope
