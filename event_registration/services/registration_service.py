"""Registration service for submitting event registrations."""
import logging
from typing import Tuple

from event_registration.models.event import EventRef
from event_registration.models.registration_form import RegistrationForm
from event_registration.services.api_client import post_registration
from event_registration.utils.exceptions import EventsApiError

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Registration Successful!"
FALLBACK_ERROR_MESSAGE = "Failed to register for event"


def submit_registration(company_name: str, event: EventRef, form: RegistrationForm) -> Tuple[bool, str]:
    """
    Submit a registration for an event.

    Args:
        company_name: Company hosting the event
        event: Resolved event; its exact id is sent as eventName
        form: Validated form values

    Returns:
        Tuple of (success: bool, message: str)
        - (True, "Registration Successful!") on success
        - (False, server error) if the API rejected it with an "error" field
        - (False, "Failed to register for event") on any other failure
    """
    logger.info("Submitting registration: company=%s event=%s", company_name, event.id)

    try:
        post_registration(form.to_payload(company_name, event.id))
    except EventsApiError as e:
        logger.error("Error registering for event %s: %s", event.id, e)
        return False, e.server_error or FALLBACK_ERROR_MESSAGE

    return True, SUCCESS_MESSAGE
