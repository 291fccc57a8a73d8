"""Quiz Content API client.

This module defines a small client wrapper around the Quiz Content
REST API.  Game tooling uses the public methods to fetch categories
and questions; content management scripts use the admin methods to
create, update and delete categories.  The client uses the
``requests`` library internally to make HTTP calls.

The client exposes high‑level methods for every endpoint:

* :meth:`list_categories` – public category metadata.
* :meth:`get_questions` – questions of one category.
* :meth:`get_questions_multi` – questions of several categories.
* :meth:`list_admin_categories` – full category records.
* :meth:`create_category` – add a category.
* :meth:`update_category` – patch a category by title.
* :meth:`delete_category` – remove a category by title.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class QuizContentAPI:
    """Client for interacting with the Quiz Content API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:4000``.
            api_prefix: Prefix under which the API is mounted.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        prefix = api_prefix.strip("/")
        self.base_url = base_url.rstrip("/") + (f"/{prefix}" if prefix else "")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/categories``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
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
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _title_path(title: str) -> str:
        return "/admin/categories/" + quote(title, safe="")

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------
    def list_categories(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve public metadata of every category."""
        data, error = self._request("GET", "/categories")
        if error:
            return [], error
        return data or [], None

    def get_questions(self, category: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the questions of a single category.

        An unknown category yields an error with ``status_code`` 404.
        """
        data, error = self._request("GET", "/questions", params={"category": category})
        if error:
            return [], error
        return data or [], None

    def get_questions_multi(
        self, categories: Iterable[str]
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the questions of several categories in the given order.

        Titles containing commas cannot be requested through this
        endpoint.
        """
        joined = ",".join(categories)
        data, error = self._request("GET", "/questions/multi", params={"categories": joined})
        if error:
            return [], error
        return data or [], None

    # ------------------------------------------------------------------
    # Admin operations
    # ------------------------------------------------------------------
    def list_admin_categories(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve every category with all of its fields."""
        data, error = self._request("GET", "/admin/categories")
        if error:
            return [], error
        return data or [], None

    def create_category(
        self, draft: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a category.  ``draft`` must contain at least ``title``."""
        return self._request("POST", "/admin/categories", json_body=draft)

    def update_category(
        self, title: str, patch: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Overwrite the fields in ``patch`` on the category titled ``title``."""
        return self._request("PUT", self._title_path(title), json_body=patch)

    def delete_category(self, title: str) -> Tuple[bool, Optional[Error]]:
        """Delete the category titled ``title``.

        Returns:
            A tuple ``(success, error)``.
        """
        data, error = self._request("DELETE", self._title_path(title))
        if error:
            return False, error
        return bool(data and data.get("success")), None
