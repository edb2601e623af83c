# api_client.py - minimal HTTP client wrapper around requests
import requests

from utils.payload_loader import get_logger

logger = get_logger("conversion-api")

DEFAULT_TIMEOUT = 10
DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class APIClient:
    def __init__(self, base_url, timeout=DEFAULT_TIMEOUT, headers=None):
        self.base_url = base_url.rstrip('/')
        self.session = requests.Session()
        self.session.headers.update(DEFAULT_HEADERS)
        if headers:
            self.session.headers.update(headers)
        self.timeout = timeout

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _url(self, endpoint):
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def _send(self, method, endpoint, **kwargs):
        url = self._url(endpoint)
        logger.debug("%s %s", method, url)
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise
        # 204 / empty body
        if not resp.content:
            return None
        try:
            return resp.json()
        except requests.JSONDecodeError:
            logger.warning("%s %s returned a non-JSON body, passing text through", method, url)
            return resp.text

    def post(self, endpoint, json_payload=None, data=None, headers=None):
        if json_payload is not None:
            return self._send("POST", endpoint, json=json_payload, headers=headers)
        return self._send("POST", endpoint, data=data, headers=headers)

    def get(self, endpoint, params=None, headers=None):
        return self._send("GET", endpoint, params=params, headers=headers)

    def close(self):
        self.session.close()
