"""Social Media API client.

A thin wrapper around the HTTP surface of the Social Media API built on
the ``requests`` library.  Every method returns a tuple ``(data,
error)``:

* on success ``data`` is the decoded JSON body (``None`` when the
  server answered with an empty body) and ``error`` is ``None``;
* on failure ``data`` is ``None`` (or an empty list for listings) and
  ``error`` is a dictionary with the keys ``status_code`` and
  ``message``.

Example::

    api = SocialMediaAPI(base_url="http://localhost:8080")
    account, error = api.register("alice", "pass1")
    message, error = api.create_message(account["accountId"], "hello")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class SocialMediaAPI:
    """Client for the account and message endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API including any mount prefix,
                e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/messages``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Account operations
    # ------------------------------------------------------------------
    def register(self, username: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Register a new account.

        Returns:
            A tuple ``(account, error)``.  A taken username yields an
            error with status code 409.
        """
        return self._request("POST", "/register", json_body={"username": username, "password": password})

    def login(self, username: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Log in; wrong credentials yield an error with status code 401."""
        return self._request("POST", "/login", json_body={"username": username, "password": password})

    def list_account_messages(self, account_id: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"/accounts/{account_id}/messages")
        if error:
            return [], error
        return data or [], None

    # ------------------------------------------------------------------
    # Message operations
    # ------------------------------------------------------------------
    def create_message(self, posted_by: int, message_text: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "POST",
            "/messages",
            json_body={"postedBy": posted_by, "messageText": message_text},
        )

    def list_messages(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/messages")
        if error:
            return [], error
        return data or [], None

    def get_message(self, message_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Fetch a message.  A missing message gives ``(None, None)``."""
        return self._request("GET", f"/messages/{message_id}")

    def patch_message(self, message_id: int, message_text: str) -> Tuple[bool, Optional[Error]]:
        """Replace the text of a message.

        Returns:
            A tuple ``(updated, error)``.
        """
        data, error = self._request(
            "PATCH", f"/messages/{message_id}", json_body={"messageText": message_text}
        )
        if error:
            return False, error
        return data == 1, None

    def delete_message(self, message_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a message.

        Returns:
            A tuple ``(deleted, error)``; ``deleted`` is ``False`` when the
            message did not exist.
        """
        data, error = self._request("DELETE", f"/messages/{message_id}")
        if error:
            return False, error
        return data == 1, None
