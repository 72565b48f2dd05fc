"""User CRUD API client.

A small wrapper around the ``/users`` resource using the ``requests``
library.  It is what the integration tests drive against a running
server, and it can be reused by scripts that manage users remotely.

Methods never raise for HTTP or connection errors.  Each returns a
tuple ``(result, error)``: on success ``error`` is ``None``; on failure
``result`` is empty and ``error`` is a dictionary with the keys
``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class UserAPIClient:
    """Client for the ``/users`` endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _send(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[requests.Response], Optional[Error]]:
        """Perform an HTTP request and return ``(response, error)``."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
                allow_redirects=False,
            )
            response.raise_for_status()
            return response, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                except ValueError:
                    message = exc.response.text
                else:
                    # Validation errors carry a list under ``detail``.
                    if isinstance(err_json, dict) and err_json.get("detail"):
                        detail = err_json["detail"]
                        message = detail if isinstance(detail, str) else str(detail)
                    else:
                        message = str(err_json)
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and return ``(parsed JSON, error)``."""
        response, error = self._send(method, path, json_body=json_body)
        if error:
            return None, error
        if response.content:
            return response.json(), None
        return None, None

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all users."""
        data, error = self._request("GET", "/users")
        if error:
            return [], error
        return data or [], None

    def get_user(self, user_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single user by id."""
        return self._request("GET", f"/users/{user_id}")

    def create_user(self, name: str) -> Tuple[Optional[str], Optional[Error]]:
        """Create a user.

        Returns:
            A tuple ``(location, error)`` where ``location`` is the URL of
            the new user taken from the ``Location`` header.
        """
        response, error = self._send("POST", "/users", json_body={"name": name})
        if error:
            return None, error
        return response.headers.get("Location"), None

    def update_user(self, user_id: int, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Rename an existing user."""
        return self._request("PUT", f"/users/{user_id}", json_body={"id": user_id, "name": name})

    def delete_user(self, user_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a user.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._send("DELETE", f"/users/{user_id}")
        if error:
            return False, error
        return True, None
