import requests
from flask import current_app


def requests_session():
    """Plain session for upstream calls: configured proxies, no retry adapter."""
    s = requests.Session()
    if current_app:
        http_proxy = current_app.config.get('HTTP_PROXY')
        https_proxy = current_app.config.get('HTTPS_PROXY')
        proxies = {}
        if http_proxy:
            proxies['http'] = http_proxy
        if https_proxy:
            proxies['https'] = https_proxy
        if proxies:
            s.proxies.update(proxies)
    return s


def request_timeout():
    if current_app:
        return current_app.config.get('EXTERNAL_REQUEST_TIMEOUT')
    return None
