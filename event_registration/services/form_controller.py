"""State machine behind the event registration page."""
import logging
from typing import Dict, Tuple

from event_registration.models.registration_form import CHOICE_FIELDS, RegistrationForm
from event_registration.models.submission_state import (
    Editing,
    EventDisabled,
    FetchError,
    Loading,
    OrgDisabled,
    Submitting,
    SubmissionState,
    Success,
)
from event_registration.services import event_resolver
from event_registration.services.event_resolver import resolve_event
from event_registration.services.registration_service import FALLBACK_ERROR_MESSAGE, submit_registration
from event_registration.utils.validation import validate_field, validate_form

logger = logging.getLogger(__name__)

MISSING_EVENT_MESSAGE = "Event information is missing. Please refresh the page and try again."
REGISTRATION_DISABLED_MESSAGE = "Registration is currently disabled for this event."
INVALID_FORM_MESSAGE = "Please correct the highlighted fields."


class RegistrationFormController:
    """
    Drive one registration page from loading to success.

    The page owns a single controller per (company, event) pair. All state
    lives on the instance so it can be kept in Streamlit's session state
    between reruns.
    """

    def __init__(self, company_name: str, event_id: str):
        self.company_name = company_name
        self.event_id = event_id
        self.form = RegistrationForm()
        self.errors: Dict[str, str] = {}
        self.state: SubmissionState = Loading()

    @property
    def key(self) -> Tuple[str, str]:
        return self.company_name, self.event_id

    @property
    def event(self):
        return getattr(self.state, "event", None)

    @property
    def is_submitting(self) -> bool:
        return isinstance(self.state, Submitting)

    def _transition(self, new_state: SubmissionState) -> None:
        logger.debug("Registration page %s/%s: %s -> %s",
                      self.company_name, self.event_id, self.state.tag, new_state.tag)
        self.state = new_state

    def load(self) -> SubmissionState:
        """
        Resolve the event and leave the loading state.

        Only runs once; later calls return the current state unchanged.
        """
        if not isinstance(self.state, Loading):
            return self.state

        resolution = resolve_event(self.company_name, self.event_id)

        if resolution.outcome == event_resolver.COMPANY_DISABLED:
            self._transition(OrgDisabled())
        elif resolution.outcome == event_resolver.EVENT_DISABLED:
            self._transition(EventDisabled(event=resolution.event))
        elif resolution.outcome == event_resolver.FOUND:
            self._transition(Editing(event=resolution.event))
        else:
            self._transition(FetchError(message=resolution.message))

        return self.state

    def change_field(self, field_name: str, value: str) -> str:
        """
        Apply one field edit and validate that field.

        Args:
            field_name: RegistrationForm field name
            value: New raw value

        Returns:
            The field's error message, or "" if valid

        Raises:
            ValueError: For unknown fields or choice values outside their options
        """
        if not isinstance(self.state, Editing):
            logger.warning("Ignoring change to %s in state %s", field_name, self.state.tag)
            return self.errors.get(field_name, "")

        self.form.set_value(field_name, value)
        message = validate_field(field_name, value)
        if field_name in CHOICE_FIELDS:
            return message

        if message:
            self.errors[field_name] = message
        else:
            self.errors.pop(field_name, None)
        return message

    def submit(self) -> Tuple[bool, str]:
        """
        Validate the whole form and send the registration.

        Returns:
            Tuple of (success: bool, message: str)
            - (False, ...) without any network call if the event is missing
              or disabled, or if any field fails validation
            - (False, server or fallback message) if the API rejects it; the
              page returns to editing with that message as a banner
            - (True, "Registration Successful!") on success; the form is reset
        """
        ready, message = self.begin_submit()
        if not ready:
            return False, message
        return self.finish_submit()

    def begin_submit(self) -> Tuple[bool, str]:
        """
        Run the submission gate and enter the submitting state.

        Returns:
            (True, "") when the page is now submitting, else (False, reason)
        """
        state = self.state

        if isinstance(state, (EventDisabled, OrgDisabled)):
            return False, REGISTRATION_DISABLED_MESSAGE

        if not isinstance(state, Editing):
            if self.event is None:
                return False, MISSING_EVENT_MESSAGE
            logger.warning("Submit ignored in state %s", state.tag)
            return False, ""

        event = state.event
        if event.is_disabled or event.is_company_disabled:
            return False, REGISTRATION_DISABLED_MESSAGE

        self.errors = validate_form(self.form)
        if self.errors:
            logger.info("Registration blocked by invalid fields: %s", sorted(self.errors))
            return False, INVALID_FORM_MESSAGE

        self._transition(Submitting(event=event))
        return True, ""

    def finish_submit(self) -> Tuple[bool, str]:
        """
        Send the registration started by begin_submit.

        Returns:
            Tuple of (success: bool, message: str)
        """
        if not isinstance(self.state, Submitting):
            logger.warning("No submission in progress (state %s)", self.state.tag)
            return False, ""

        event = self.state.event
        try:
            success, message = submit_registration(self.company_name, event, self.form)
        except Exception:
            self._transition(Editing(event=event, banner=FALLBACK_ERROR_MESSAGE))
            raise

        if success:
            self.form.reset()
            self.errors = {}
            self._transition(Success(event=event))
        else:
            self._transition(Editing(event=event, banner=message))

        return success, message
