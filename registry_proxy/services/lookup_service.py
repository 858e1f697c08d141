"""Request pipelines behind each API route.

Each function validates caller input, calls OpenCorporates, strips
``opencorporates_url`` from the payload, flattens the wrapped entities with
path queries and returns the response envelope. Failures are raised as
``RegistryProxyError`` subclasses and turned into envelopes by the app's
error handlers.
"""

from typing import Mapping, Optional

from flask import current_app

from ..adapters.base import UpstreamResponse
from ..adapters.opencorporates_adapter import OpenCorporatesAdapter
from ..errors import ConfigurationError, UpstreamApiError, ValidationError
from . import extractor
from .aggregator import entity_envelope, search_envelope
from .sanitizer import sanitize

COMPANY_SEARCH_PATH = "$.results.companies..company"
COMPANY_PATH = "$.results.company"
COMPANY_OFFICERS_PATH = "$.results.company.officers..officer"
COMPANY_OWNERS_PATH = "$.results.company.ultimate_beneficial_owners..ultimate_beneficial_owner"
COMPANY_FILINGS_PATH = "$.results.company.filings..filing"
OFFICER_SEARCH_PATH = "$.results.officers..officer"
OFFICER_PATH = "$.results.officer"
OFFICER_RELATIONSHIPS_PATH = "$.results.officer.relationships..relationship"


def _adapter() -> OpenCorporatesAdapter:
    adapter = OpenCorporatesAdapter.from_config(current_app.config)
    if not adapter.api_token:
        raise ConfigurationError()
    return adapter


def _require_query(args: Mapping[str, Optional[str]]) -> str:
    q = args.get("q")
    if not q:
        raise ValidationError("Missing required parameter: q (query) is required")
    return q


def _payload(response: UpstreamResponse):
    if not response.ok:
        raise UpstreamApiError(response.status_code, sanitize(response.body))
    return sanitize(response.body)


def search_companies(args: Mapping[str, Optional[str]]) -> dict:
    q = _require_query(args)
    payload = _payload(_adapter().search_companies(args))
    return search_envelope(extractor.query(payload, COMPANY_SEARCH_PATH), q)


def get_company(jurisdiction_code: str, company_number: str, args: Mapping[str, Optional[str]]) -> dict:
    if not jurisdiction_code or not company_number:
        raise ValidationError(
            "Missing required parameters: jurisdiction_code and company_number are required"
        )
    payload = _payload(_adapter().get_company(jurisdiction_code, company_number, args))
    related = {
        "officers": extractor.query(payload, COMPANY_OFFICERS_PATH),
        "beneficialOwners": extractor.query(payload, COMPANY_OWNERS_PATH),
        "filings": extractor.query(payload, COMPANY_FILINGS_PATH),
    }
    return entity_envelope(
        "company",
        extractor.first(payload, COMPANY_PATH),
        related,
        jurisdiction_code=jurisdiction_code,
        company_number=company_number,
    )


def search_officers(args: Mapping[str, Optional[str]]) -> dict:
    q = _require_query(args)
    payload = _payload(_adapter().search_officers(args))
    return search_envelope(extractor.query(payload, OFFICER_SEARCH_PATH), q)


def get_officer(officer_id: str, args: Mapping[str, Optional[str]]) -> dict:
    if not officer_id:
        raise ValidationError("Missing required parameter: officer_id is required")
    payload = _payload(_adapter().get_officer(officer_id, args))
    related = {"companies": extractor.query(payload, OFFICER_RELATIONSHIPS_PATH)}
    return entity_envelope(
        "officer",
        extractor.first(payload, OFFICER_PATH),
        related,
        officer_id=officer_id,
    )
