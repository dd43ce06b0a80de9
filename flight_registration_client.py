"""Flight registration API client.

A small wrapper around the ``/api/register-flight`` REST endpoints,
for scripts and services that talk to the API from Python.  It uses
the ``requests`` library and exposes one method per operation:

* :meth:`register_flight` – create a registration.
* :meth:`get_registered_flights` – list all registrations.
* :meth:`update_flight_registration` – replace an existing registration.
* :meth:`delete_flight_registration` – remove a registration.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with keys ``status_code`` and ``message`` (always a string).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

REGISTER_FLIGHT_PATH = "/api/register-flight"


def _error_message(err_json: Any) -> str:
    """Flatten an error body into one line.

    FastAPI validation errors carry ``detail`` as a list of
    ``{"loc": [...], "msg": ...}`` entries; they are joined as
    ``body.maxAltitude: Input should be a finite number``.
    """
    if not isinstance(err_json, dict):
        return str(err_json)
    detail = err_json.get("detail") or err_json.get("message")
    if isinstance(detail, list):
        parts = []
        for item in detail:
            if isinstance(item, dict):
                loc = ".".join(str(p) for p in item.get("loc", []))
                msg = item.get("msg", "")
                parts.append(f"{loc}: {msg}" if loc else str(msg))
            else:
                parts.append(str(item))
        return "; ".join(parts)
    if detail:
        return str(detail)
    return str(err_json)


class FlightRegistrationClient:
    """Client for the flight registration API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url`.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response, or ``None`` for an empty body.
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
                    message = _error_message(err_json)
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
    # Flight registration operations
    # ------------------------------------------------------------------
    def register_flight(
        self, flight_data: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Register a flight.

        Args:
            flight_data: Registration fields in camelCase, without ``id``.
        Returns:
            A tuple ``(registration, error)``; the registration carries
            the ``id`` assigned by the server.
        """
        payload = {k: v for k, v in flight_data.items() if k != "id"}
        return self._request("POST", REGISTER_FLIGHT_PATH, json_body=payload)

    def get_registered_flights(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all registered flights."""
        data, error = self._request("GET", REGISTER_FLIGHT_PATH)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    def update_flight_registration(
        self, flight_data: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Replace a registration.

        Args:
            flight_data: Full registration including its ``id``.
        Returns:
            A tuple ``(registration, error)``.
        """
        flight_id = flight_data.get("id")
        if flight_id is None:
            return None, {"status_code": None, "message": "Flight registration has no id"}
        return self._request(
            "PUT", f"{REGISTER_FLIGHT_PATH}/{flight_id}", json_body=flight_data
        )

    def delete_flight_registration(self, flight_id: int) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Delete a registration.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"{REGISTER_FLIGHT_PATH}/{flight_id}")
        if error:
            return False, error
        return True, None
