"""Event lookup for the registration page."""
import logging
from dataclasses import dataclass
from typing import Optional

from event_registration.models.event import EventRef
from event_registration.services.api_client import fetch_company_events
from event_registration.utils.exceptions import CompanyDisabledError, EventNotFoundError, EventsApiError
from event_registration.utils.validation import normalize_event_id

logger = logging.getLogger(__name__)

FOUND = "found"
NOT_FOUND = "not_found"
COMPANY_DISABLED = "company_disabled"
EVENT_DISABLED = "event_disabled"

NOT_AVAILABLE_MESSAGE = "Event not found or no longer available"


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving an event for the registration page."""

    outcome: str
    event: Optional[EventRef] = None
    message: str = ""


def find_event(events, event_id: str) -> EventRef:
    """
    Pick the event whose id matches, ignoring case and surrounding whitespace.

    Args:
        events: Raw event records from the API
        event_id: Requested event identifier

    Returns:
        The first matching EventRef

    Raises:
        EventNotFoundError: If no parsable record matches
    """
    wanted = normalize_event_id(event_id)
    available = []

    for record in events:
        try:
            event = EventRef.from_dict(record)
        except ValueError as e:
            logger.warning("Skipping malformed event record: %s", e)
            continue

        available.append(event.id)
        if normalize_event_id(event.id) == wanted:
            return event

    logger.warning("Event not found: %r, available events: %s", event_id, available)
    raise EventNotFoundError(f"Event not found: {event_id}")


def resolve_event(company_name: str, event_id: str) -> Resolution:
    """
    Resolve the event a registration page points at.

    Args:
        company_name: Decoded company name
        event_id: Decoded event identifier

    Returns:
        Resolution with outcome
        - "company_disabled" if the API denies access (403) or the matched
          event's companyStatus is "disabled"
        - "event_disabled" if the matched event's status is "disabled"
        - "not_found" on any other failure or when nothing matches
        - "found" otherwise
    """
    try:
        events = fetch_company_events(company_name)
    except CompanyDisabledError:
        logger.info("Company %s is disabled", company_name)
        return Resolution(COMPANY_DISABLED)
    except EventsApiError as e:
        logger.error("Error fetching event details: %s", e)
        return Resolution(NOT_FOUND, message=NOT_AVAILABLE_MESSAGE)

    try:
        event = find_event(events, event_id)
    except EventNotFoundError:
        return Resolution(NOT_FOUND, message=NOT_AVAILABLE_MESSAGE)

    logger.info("Found matching event: %s", event.id)

    if event.is_company_disabled:
        return Resolution(COMPANY_DISABLED, event=event)

    if event.is_disabled:
        return Resolution(EVENT_DISABLED, event=event)

    return Resolution(FOUND, event=event)
