"""
HTTP request handler for the RajaOngkir API.
Wraps a requests.Session, attaches the API key header, applies the fixed timeout,
and turns transport and JSON failures into the package's error types.
"""
import logging
from typing import Any

import requests

from rajaongkir.api.errors import DecodeError, TransportError

DEFAULT_TIMEOUT = 10.0


class RequestHandler:
    def __init__(self, base_url: str, session: requests.Session | None = None, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        # A caller-supplied session is shared; only a session created here is closed by close().
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def auth_headers(self, api_key: str) -> dict:
        return {"key": api_key}

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get_json(self, path: str, api_key: str, params: dict | None = None) -> Any:
        """
        GET helper.
        path: endpoint relative to base_url, e.g. "province"
        returns the parsed JSON payload
        """
        url = self.url_for(path)
        logging.debug(f"GET {url} params={params}")
        try:
            resp = self.session.get(url, headers=self.auth_headers(api_key), params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"GET {url} failed: {e}") from e
        return self._decode(resp, f"GET {url}")

    def post_form(self, path: str, api_key: str, body: str) -> Any:
        """
        Form-encoded POST helper. The body is sent as-is so field order is kept.
        """
        url = self.url_for(path)
        headers = self.auth_headers(api_key)
        headers["Content-Type"] = "application/x-www-form-urlencoded"
        logging.debug(f"POST {url} body={body}")
        try:
            resp = self.session.post(url, headers=headers, data=body, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"POST {url} failed: {e}") from e
        return self._decode(resp, f"POST {url}")

    def _decode(self, resp: requests.Response, label: str) -> Any:
        logging.debug(f"{label} -> HTTP {resp.status_code}")
        try:
            payload = resp.json()
        except ValueError as e:
            if resp.status_code >= 400:
                raise TransportError(f"{label} returned HTTP {resp.status_code}", status_code=resp.status_code) from e
            raise DecodeError(f"{label} returned a body that is not valid JSON: {e}") from e
        # Error replies that still carry an envelope are left for the status check.
        if resp.status_code >= 400 and not (isinstance(payload, dict) and "rajaongkir" in payload):
            raise TransportError(f"{label} returned HTTP {resp.status_code}", status_code=resp.status_code)
        return payload
