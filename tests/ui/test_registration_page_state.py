"""Tests for registration page session state handling."""
from unittest.mock import patch

import pytest

from event_registration.models.event import EventRef
from event_registration.models.submission_state import Editing, Success
from event_registration.services.event_resolver import FOUND, Resolution
from event_registration.services.form_controller import RegistrationFormController
from event_registration.ui.registration_page import (
    CONTROLLER_KEY,
    _complete_submission,
    _get_controller,
)

VALID_VALUES = {
    "name": "Ada Lovelace",
    "phone": "1234567890",
    "email": "a@b.co",
    "gender": "female",
    "college": "MIT",
    "status": "student",
    "national_id": "29912345678901",
}

WIDGET_STATE = {
    "registration_field_name": "Ada Lovelace",
    "registration_field_phone": "1234567890",
    "registration_submit": False,
    "theme": "dark",
}


@pytest.fixture
def submitting_controller():
    """Controller with a valid form that has passed the submission gate."""
    controller = RegistrationFormController("Acme", "launch-party")
    with patch("event_registration.services.form_controller.resolve_event",
               return_value=Resolution(FOUND, event=EventRef(id="launch-party", name="Launch Party"))):
        controller.load()
    for field_name, value in VALID_VALUES.items():
        controller.change_field(field_name, value)
    controller.begin_submit()
    return controller


class TestGetController:
    """Test _get_controller."""

    @patch('event_registration.ui.registration_page.st')
    def test_creates_controller_on_first_visit(self, mock_st):
        """A fresh session gets a controller for the page address."""
        mock_st.session_state = {}

        controller = _get_controller("Acme", "launch-party")

        assert controller.key == ("Acme", "launch-party")
        assert mock_st.session_state[CONTROLLER_KEY] is controller

    @patch('event_registration.ui.registration_page.st')
    def test_same_address_reuses_controller(self, mock_st):
        """Reruns for the same address keep the controller and widget values."""
        existing = RegistrationFormController("Acme", "launch-party")
        mock_st.session_state = {CONTROLLER_KEY: existing, **WIDGET_STATE}

        controller = _get_controller("Acme", "launch-party")

        assert controller is existing
        assert mock_st.session_state["registration_field_name"] == "Ada Lovelace"

    @patch('event_registration.ui.registration_page.st')
    def test_new_address_starts_over(self, mock_st):
        """A different address builds a new controller and drops old widget values."""
        existing = RegistrationFormController("Acme", "launch-party")
        mock_st.session_state = {CONTROLLER_KEY: existing, **WIDGET_STATE}

        controller = _get_controller("Acme", "workshop")

        assert controller is not existing
        assert controller.key == ("Acme", "workshop")
        assert mock_st.session_state[CONTROLLER_KEY] is controller
        assert "registration_field_name" not in mock_st.session_state
        assert "registration_field_phone" not in mock_st.session_state
        assert mock_st.session_state["registration_submit"] is False
        assert mock_st.session_state["theme"] == "dark"


class TestCompleteSubmission:
    """Test _complete_submission."""

    @patch('event_registration.services.form_controller.submit_registration')
    @patch('event_registration.ui.registration_page.st')
    def test_success_clears_widget_state(self, mock_st, mock_submit, submitting_controller):
        """A successful registration empties the inputs before the rerun."""
        mock_submit.return_value = (True, "Registration Successful!")
        mock_st.session_state = {CONTROLLER_KEY: submitting_controller, **WIDGET_STATE}

        _complete_submission(submitting_controller)

        assert isinstance(submitting_controller.state, Success)
        assert not any(key.startswith("registration_field_") for key in mock_st.session_state)
        assert mock_st.session_state[CONTROLLER_KEY] is submitting_controller
        mock_st.spinner.assert_called_once_with("Submitting...")
        mock_st.rerun.assert_called_once()

    @patch('event_registration.services.form_controller.submit_registration')
    @patch('event_registration.ui.registration_page.st')
    def test_failure_keeps_widget_state(self, mock_st, mock_submit, submitting_controller):
        """A rejected registration keeps the typed values and shows the banner."""
        mock_submit.return_value = (False, "Duplicate registration")
        mock_st.session_state = {CONTROLLER_KEY: submitting_controller, **WIDGET_STATE}

        _complete_submission(submitting_controller)

        assert submitting_controller.state == Editing(event=submitting_controller.event,
                                                      banner="Duplicate registration")
        assert mock_st.session_state["registration_field_name"] == "Ada Lovelace"
        mock_st.rerun.assert_called_once()
