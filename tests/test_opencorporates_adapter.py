from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from registry_proxy.adapters.opencorporates_adapter import OpenCorporatesAdapter
from registry_proxy.errors import UpstreamConnectionError, UpstreamParseError

from conftest import FakeSession


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def adapter(session):
    return OpenCorporatesAdapter("s3cr3t", base_url="https://api.example.test/", session=session)


def _sent(session):
    parts = urlsplit(session.calls[-1]["url"])
    return parts, parse_qs(parts.query)


def test_builds_url_and_injects_token(adapter, session):
    session.reply(200, {"results": {}})
    adapter.search_companies({"q": "Apple", "api_token": "mine", "country_code": ""})
    parts, qs = _sent(session)
    assert parts.scheme == "https"
    assert parts.netloc == "api.example.test"
    assert parts.path == "/v0.4/companies/search"
    assert qs == {"q": ["Apple"], "api_token": ["s3cr3t"]}
    assert session.calls[-1]["headers"] == {"Content-Type": "application/json"}


def test_detail_paths_are_quoted_and_drop_pagination(adapter, session):
    adapter.get_company("us_de", "12/34", {"page": "2", "sparse": "true"})
    parts, qs = _sent(session)
    assert parts.path == "/v0.4/companies/us_de/12%2F34"
    assert qs == {"sparse": ["true"], "api_token": ["s3cr3t"]}

    adapter.get_officer("123", {"per_page": "10"})
    parts, qs = _sent(session)
    assert parts.path == "/v0.4/officers/123"
    assert qs == {"api_token": ["s3cr3t"]}


def test_search_officers_path(adapter, session):
    adapter.search_officers({"q": "Jane", "per_page": "5"})
    parts, qs = _sent(session)
    assert parts.path == "/v0.4/officers/search"
    assert qs["per_page"] == ["5"]


def test_returns_status_and_parsed_body(adapter, session):
    session.reply(200, {"results": {"company": {"name": "Acme"}}})
    resp = adapter.get("companies/gb/1", {})
    assert resp.ok
    assert resp.status_code == 200
    assert resp.body == {"results": {"company": {"name": "Acme"}}}


def test_non_2xx_is_returned_not_raised(adapter, session):
    session.reply(404, {"error": "not found"})
    resp = adapter.get("companies/gb/0", {})
    assert not resp.ok
    assert resp.body == {"error": "not found"}


@pytest.mark.parametrize("status_code", [200, 404, 502])
def test_non_json_body_raises_parse_error(adapter, session, status_code):
    session.reply(status_code, text="<html>Service Unavailable</html>")
    with pytest.raises(UpstreamParseError):
        adapter.get("companies/search", {})


def test_malformed_json_on_success_raises_parse_error(adapter, session):
    session.reply(200, text="{not json")
    with pytest.raises(UpstreamParseError):
        adapter.get("companies/search", {})


def test_caller_session_is_left_open(adapter, session):
    adapter.get("companies/search", {})
    assert session.closed is False


def test_own_session_is_closed_after_call(upstream):
    adapter = OpenCorporatesAdapter("s3cr3t")
    adapter.search_companies({"q": "x"})
    assert upstream.closed is True


def test_own_session_is_closed_after_failure(upstream):
    upstream.fail(requests.ConnectionError("refused"))
    with pytest.raises(UpstreamConnectionError):
        OpenCorporatesAdapter("s3cr3t").search_companies({"q": "x"})
    assert upstream.closed is True


def test_transport_failure_raises_connection_error_without_token(adapter, session):
    session.fail(requests.ConnectionError("failed GET https://api.example.test/v0.4/companies/search?api_token=s3cr3t"))
    with pytest.raises(UpstreamConnectionError) as exc:
        adapter.get("companies/search", {"q": "x"})
    assert "api_token=***" in exc.value.detail
    assert "s3cr3t" not in exc.value.detail


def test_from_config_defaults():
    adapter = OpenCorporatesAdapter.from_config({"OPEN_CORPORATES_KEY": "k"})
    assert adapter.api_token == "k"
    assert adapter.url_for("companies/search") == "https://api.opencorporates.com/v0.4/companies/search"
