# registry_proxy/adapters/opencorporates_adapter.py
# Client for the OpenCorporates REST API. One buffered GET per call, no retries, no caching.

from typing import Mapping, Optional
from urllib.parse import quote

import requests

from .base import UpstreamResponse
from ..errors import UpstreamConnectionError, UpstreamParseError
from ..services.normalizer import build_query_string
from ..utils.http import requests_session, request_timeout
from ..utils.logging import get_logger


class OpenCorporatesAdapter:
    BASE = "https://api.opencorporates.com/"
    API_VERSION = "v0.4"
    HEADERS = {"Content-Type": "application/json"}

    def __init__(self, api_token: str, base_url: Optional[str] = None, api_version: Optional[str] = None,
                 timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.api_token = api_token
        self.base_url = (base_url or self.BASE).rstrip("/")
        self.api_version = (api_version or self.API_VERSION).strip("/")
        self.timeout = timeout
        self.session = session

    @classmethod
    def from_config(cls, config, session: Optional[requests.Session] = None) -> "OpenCorporatesAdapter":
        return cls(
            api_token=config.get("OPEN_CORPORATES_KEY", ""),
            base_url=config.get("OPEN_CORPORATES_URL"),
            api_version=config.get("OPEN_CORPORATES_API_VERSION"),
            timeout=config.get("EXTERNAL_REQUEST_TIMEOUT"),
            session=session,
        )

    def _redact(self, text: str) -> str:
        # exception messages from requests may embed the full URL
        return text.replace(self.api_token, "***") if self.api_token else text

    def url_for(self, path: str, query_string: str = "") -> str:
        url = f"{self.base_url}/{self.api_version}/{path.lstrip('/')}"
        return f"{url}?{query_string}" if query_string else url

    def _send(self, session, url: str, path: str):
        timeout = self.timeout if self.timeout is not None else request_timeout()
        try:
            r = session.get(url, headers=self.HEADERS, timeout=timeout)
            # r.content forces the whole body to be read before we touch it
            r.content
        except requests.RequestException as e:
            get_logger().warning("OpenCorporates request failed for %s: %s", path, type(e).__name__)
            raise UpstreamConnectionError(detail=self._redact(str(e))) from e
        return r

    def get(self, path: str, params: Mapping[str, Optional[str]], exclude_pagination: bool = False) -> UpstreamResponse:
        logger = get_logger()
        url = self.url_for(path, build_query_string(params, self.api_token, exclude_pagination))

        logger.debug("OpenCorporates GET /%s/%s", self.api_version, path.lstrip("/"))
        if self.session is not None:
            r = self._send(self.session, url, path)
        else:
            # one session per call, closed once the body is read or the call fails
            with requests_session() as session:
                r = self._send(session, url, path)

        try:
            return UpstreamResponse(status_code=r.status_code, body=r.json())
        except ValueError as e:
            logger.warning("OpenCorporates returned non-JSON body for %s (HTTP %s)", path, r.status_code)
            raise UpstreamParseError(detail=str(e)) from e

    def search_companies(self, params: Mapping[str, Optional[str]]) -> UpstreamResponse:
        return self.get("companies/search", params)

    def get_company(self, jurisdiction_code: str, company_number: str,
                    params: Mapping[str, Optional[str]]) -> UpstreamResponse:
        path = f"companies/{quote(jurisdiction_code, safe='')}/{quote(company_number, safe='')}"
        return self.get(path, params, exclude_pagination=True)

    def search_officers(self, params: Mapping[str, Optional[str]]) -> UpstreamResponse:
        return self.get("officers/search", params)

    def get_officer(self, officer_id: str, params: Mapping[str, Optional[str]]) -> UpstreamResponse:
        return self.get(f"officers/{quote(officer_id, safe='')}", params, exclude_pagination=True)
