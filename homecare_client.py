"""Home Healthcare booking API client.

A thin wrapper around the REST API served by ``homecare_api``.  It is
what a script, a bot or another service uses instead of the web
client: list services, book an appointment, move a booking through
its lifecycle, leave a review and read the dashboard figures.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list for
listing calls) and ``error`` is a dictionary with ``status_code``,
``message`` and, for validation failures, ``field``.  The client never
raises for HTTP or network errors.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class HomecareAPI:
    """Client for the Home Healthcare booking API."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Server root, e.g. ``http://localhost:8000``.  The
                ``/api`` prefix is added by the client.
            timeout: Per request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request against ``/api<path>``.

        Query parameters whose value is ``None`` are dropped.
        """
        url = f"{self.base_url}/api{path}"
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params or None,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            error: Error = {"status_code": status, "message": ""}
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    error["message"] = err_json.get("message") or err_json.get("detail") or str(err_json)
                    if err_json.get("field"):
                        error["field"] = err_json["field"]
                except ValueError:
                    error["message"] = exc.response.text
            if not error["message"]:
                error["message"] = str(exc)
            logger.error("API request failed (%s): %s", status, error["message"])
            return None, error
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _list(self, path: str, params: Dict[str, Any] | None = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path, params=params)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------
    def current_user(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Return the user the server treats as "me"."""
        return self._request("GET", "/users/me")

    def list_users(self, role: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/users", {"role": role})

    def update_user(self, user_id: int, changes: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PATCH", f"/users/{user_id}", json_body=changes)

    # ------------------------------------------------------------------
    # Services
    # ------------------------------------------------------------------
    def list_services(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/services")

    # ------------------------------------------------------------------
    # Bookings
    # ------------------------------------------------------------------
    def list_bookings(
        self, role: Optional[str] = None, user_id: Optional[int] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """List bookings as seen by ``role``/``user_id``.

        Without arguments every booking is returned.
        """
        return self._list("/bookings", {"role": role, "userId": user_id})

    def create_booking(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Book a service.

        Args:
            payload: camelCase booking fields, at least ``customerId``,
                ``serviceId``, ``scheduledDate`` and ``address``.
        """
        return self._request("POST", "/bookings", json_body=payload)

    def update_booking(self, booking_id: int, changes: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PATCH", f"/bookings/{booking_id}", json_body=changes)

    def set_booking_status(self, booking_id: int, status: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Shortcut for the provider actions (confirm, cancel, complete)."""
        return self.update_booking(booking_id, {"status": status})

    # ------------------------------------------------------------------
    # Reviews and dashboard
    # ------------------------------------------------------------------
    def create_review(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/reviews", json_body=payload)

    def list_reviews(self, provider_id: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/reviews", {"providerId": provider_id})

    def dashboard_stats(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/dashboard/stats")
