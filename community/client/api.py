"""
HTTP client for the FlavorWorld REST API.

Every call returns a tagged result instead of raising: ``{"success": True,
"data": ...}`` or ``{"success": False, "kind": ..., "message": ...,
"status": ...}``. Requests always carry a timeout, and a timeout is reported
as its own error kind so the UI can show a connection message.
"""

import logging

import requests
from django.conf import settings

from community.errors import ErrorKind, fail, kind_for_status, ok

logger = logging.getLogger(__name__)

TIMEOUT_MESSAGE = "Connection timeout. Please check your network and try again."
NETWORK_MESSAGE = "Network error - server not responding"


def _setting(name, default):
    if settings.configured:
        return getattr(settings, name, default)
    return default


class ApiClient:
    """Thin ``requests.Session`` wrapper bound to one base URL and acting user."""

    def __init__(self, base_url=None, *, user_id=None, timeout=None, session=None):
        self.base_url = (base_url or _setting("FLAVORWORLD_API_BASE_URL", "http://localhost:8000/api")).rstrip("/")
        self.timeout = timeout or _setting("FLAVORWORLD_API_TIMEOUT", 10)
        self.session = session or requests.Session()
        self.session.headers.setdefault("Content-Type", "application/json")
        self.user_id = None
        if user_id is not None:
            self.set_user(user_id)

    def set_user(self, user_id):
        """Act as ``user_id`` on every following request (``None`` clears it)."""
        self.user_id = user_id
        if user_id is None:
            self.session.headers.pop("X-User-Id", None)
        else:
            self.session.headers["X-User-Id"] = str(user_id)

    def url(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method, path, *, json=None, params=None, timeout=None):
        url = self.url(path)
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(
                method,
                url,
                json=json,
                params=params,
                timeout=timeout or self.timeout,
            )
        except requests.Timeout:
            logger.warning("%s %s timed out", method, url)
            return fail(ErrorKind.TIMEOUT, TIMEOUT_MESSAGE)
        except requests.ConnectionError as exc:
            logger.warning("%s %s failed to connect: %s", method, url, exc)
            return fail(ErrorKind.UNAVAILABLE, NETWORK_MESSAGE)
        except requests.RequestException as exc:
            logger.warning("%s %s could not be sent: %s", method, url, exc)
            return fail(ErrorKind.UNKNOWN, str(exc) or "Request configuration error")
        return self._result(method, url, response)

    def _result(self, method, url, response):
        body = self._json(response)
        if response.ok:
            return ok(body, status=response.status_code)

        message = None
        if isinstance(body, dict):
            message = body.get("message") or body.get("detail")
        message = message or f"Server error: {response.status_code}"
        logger.warning("%s %s -> %s: %s", method, url, response.status_code, message)
        return fail(kind_for_status(response.status_code), message, status=response.status_code)

    @staticmethod
    def _json(response):
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    def get(self, path, **kwargs):
        return self.request("GET", path, **kwargs)

    def post(self, path, json=None, **kwargs):
        return self.request("POST", path, json=json, **kwargs)

    def put(self, path, json=None, **kwargs):
        return self.request("PUT", path, json=json, **kwargs)

    def delete(self, path, json=None, **kwargs):
        return self.request("DELETE", path, json=json, **kwargs)

    def health(self):
        return self.get("/health")
