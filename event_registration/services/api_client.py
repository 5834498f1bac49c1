"""HTTP transport for the events API."""
import logging
from typing import Any, Dict, List

import requests

from event_registration.utils.config import get_api_base_url, get_request_timeout
from event_registration.utils.exceptions import CompanyDisabledError, EventsApiError

logger = logging.getLogger(__name__)

EVENTS_PATH = "/api/events"
REGISTER_PATH = "/api/events/register"


def _error_from_response(response: requests.Response) -> str:
    """Return the server-provided "error" string, or "" if there is none."""
    try:
        body = response.json()
    except ValueError:
        return ""

    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return ""


def fetch_company_events(company_name: str) -> List[Dict[str, Any]]:
    """
    Fetch every event of a company.

    Args:
        company_name: Decoded company name

    Returns:
        List of raw event records from the "events" key

    Raises:
        CompanyDisabledError: If the API answers 403 (company disabled)
        EventsApiError: On transport failure, any other non-2xx status,
                        or a body without an "events" list
    """
    url = f"{get_api_base_url()}{EVENTS_PATH}"
    logger.info("Fetching events for company: %s", company_name)

    try:
        response = requests.get(url, params={"company": company_name}, timeout=get_request_timeout())
    except requests.RequestException as e:
        raise EventsApiError(f"Failed to fetch event details: {e}") from e

    if response.status_code == 403:
        raise CompanyDisabledError(
            "Company is disabled",
            status_code=403,
            server_error=_error_from_response(response) or None,
        )

    if not response.ok:
        raise EventsApiError(
            f"Failed to fetch event details (HTTP {response.status_code})",
            status_code=response.status_code,
            server_error=_error_from_response(response) or None,
        )

    try:
        body = response.json()
    except ValueError as e:
        raise EventsApiError("Malformed events response", status_code=response.status_code) from e

    events = body.get("events") if isinstance(body, dict) else None
    if not isinstance(events, list):
        raise EventsApiError("Events response has no events list", status_code=response.status_code)

    logger.debug("Events received for %s: %d", company_name, len(events))
    return events


def post_registration(payload: Dict[str, Any]) -> None:
    """
    Submit a registration record.

    Args:
        payload: JSON body built by RegistrationForm.to_payload

    Raises:
        EventsApiError: On transport failure or non-2xx status; server_error
                        holds the response's "error" string when present
    """
    url = f"{get_api_base_url()}{REGISTER_PATH}"

    try:
        response = requests.post(url, json=payload, timeout=get_request_timeout())
    except requests.RequestException as e:
        raise EventsApiError(f"Registration request failed: {e}") from e

    if not response.ok:
        raise EventsApiError(
            f"Registration rejected (HTTP {response.status_code})",
            status_code=response.status_code,
            server_error=_error_from_response(response) or None,
        )
