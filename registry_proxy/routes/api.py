# registry_proxy/routes/api.py
# REST API: company/officer search and lookup proxied to OpenCorporates

from flask import Blueprint, request, jsonify
from ..services import lookup_service

api_bp = Blueprint("api", __name__, url_prefix="/api")


def _query_args() -> dict:
    # first value per key, in request order
    return request.args.to_dict(flat=True)


@api_bp.get("/companies/search")
def companies_search():
    """Search companies: ?q=<term>, every other parameter is forwarded as-is."""
    return jsonify(lookup_service.search_companies(_query_args()))


@api_bp.get("/companies/<jurisdiction_code>/<company_number>")
def company_detail(jurisdiction_code: str, company_number: str):
    """Company record with its officers, ultimate beneficial owners and filings."""
    return jsonify(lookup_service.get_company(jurisdiction_code, company_number, _query_args()))


@api_bp.get("/officers/search")
@api_bp.get("/person/search", endpoint="person_search")
def officers_search():
    return jsonify(lookup_service.search_officers(_query_args()))


@api_bp.get("/officers/<officer_id>")
@api_bp.get("/person/<officer_id>", endpoint="person_detail")
def officer_detail(officer_id: str):
    """Officer record with the companies it is related to."""
    return jsonify(lookup_service.get_officer(officer_id, _query_args()))
