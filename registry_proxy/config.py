# registry_proxy/config.py
# Configuration: upstream URL/token, environment mode, outbound HTTP settings from .env

import os
from dotenv import load_dotenv

load_dotenv()


def _optional_float(name: str):
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


class Config:
    APP_NAME = "Registry Proxy"
    # development echoes exception detail in error envelopes
    ENV = os.getenv("FLASK_ENV", "production")
    JSON_SORT_KEYS = False

    # OpenCorporates
    OPEN_CORPORATES_KEY = os.getenv("OPEN_CORPORATES_KEY", "")
    OPEN_CORPORATES_URL = os.getenv("OPEN_CORPORATES_URL", "https://api.opencorporates.com/")
    OPEN_CORPORATES_API_VERSION = os.getenv("OPEN_CORPORATES_API_VERSION", "v0.4")

    # HTTP: no timeout unless configured, no retries
    EXTERNAL_REQUEST_TIMEOUT = _optional_float("EXTERNAL_REQUEST_TIMEOUT")
    HTTP_PROXY = os.getenv("HTTP_PROXY", "")
    HTTPS_PROXY = os.getenv("HTTPS_PROXY", "")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    PORT = int(os.getenv("PORT", "3000"))


def is_development(config) -> bool:
    return (config.get("ENV") or "").lower() == "development"
