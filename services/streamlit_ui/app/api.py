import logging
from typing import Any, Optional

import requests

from config import API_BASE_URL, API_TOKEN, API_CONNECT_TIMEOUT, API_READ_TIMEOUT

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised for any failed call to the finance backend."""

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None,
                 backend_message: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.backend_message = backend_message
        self.status_code = status_code
        self.payload = payload


def unwrap_envelope(body: Any) -> Any:
    """
    The backend answers either with the payload itself or with
    {"success": true, "data": <payload>}. Return the payload in both cases.
    """
    if isinstance(body, dict) and "data" in body:
        return body["data"]
    return body


def error_message(exc: Exception, default: str) -> str:
    """Pick the message shown to the user for a failed request."""
    if isinstance(exc, ApiError) and exc.message:
        return exc.message
    return str(exc) or default


def backend_message(exc: Exception, default: str) -> str:
    """Message sent by the backend for a failed request, else the default."""
    if isinstance(exc, ApiError) and exc.backend_message:
        return exc.backend_message
    return default


def _backend_message(resp: requests.Response) -> Optional[str]:
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        msg = body.get("message") or body.get("error")
        if isinstance(msg, str) and msg:
            return msg
    return None


class ApiClient:
    """Thin JSON client over requests with the backend base URL and auth header."""

    def __init__(self, base_url: str = API_BASE_URL, token: Optional[str] = API_TOKEN, session=None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = (API_CONNECT_TIMEOUT, API_READ_TIMEOUT)
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        kwargs.setdefault("timeout", self.timeout)

        try:
            r = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise ApiError(str(e)) from e

        if not r.ok:
            backend_msg = _backend_message(r)
            msg = backend_msg or f"{r.status_code} error for {method} {path}"
            logger.warning("%s %s -> %s: %s", method, url, r.status_code, msg)
            raise ApiError(msg, status_code=r.status_code, payload=r.text, backend_message=backend_msg)

        logger.debug("%s %s -> %s %s", method, url, r.status_code, r.text[:500])

        if r.status_code == 204 or not r.content:
            return None
        try:
            return r.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON from {method} {path}", status_code=r.status_code) from e

    def get(self, path: str, params=None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json=None) -> Any:
        return self.request("POST", path, json=json)

    def put(self, path: str, json=None) -> Any:
        return self.request("PUT", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)


api_client = ApiClient()
