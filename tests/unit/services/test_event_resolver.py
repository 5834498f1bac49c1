"""Unit tests for event_resolver."""
from unittest.mock import patch

import pytest

from event_registration.services.event_resolver import (
    COMPANY_DISABLED,
    EVENT_DISABLED,
    FOUND,
    NOT_AVAILABLE_MESSAGE,
    NOT_FOUND,
    find_event,
    resolve_event,
)
from event_registration.utils.exceptions import CompanyDisabledError, EventNotFoundError, EventsApiError


@pytest.fixture
def events():
    """Event list for the Acme company."""
    return [
        {"id": "workshop", "name": "Workshop", "date": "2025-02-01", "registrations": 3},
        {"id": "launch-party", "name": "Launch Party", "date": "2025-01-06", "registrations": 10},
    ]


class TestFindEvent:
    """Test find_event matching."""

    def test_exact_match(self, events):
        assert find_event(events, "workshop").name == "Workshop"

    def test_case_insensitive_match(self, events):
        assert find_event(events, "Launch-Party").id == "launch-party"

    def test_whitespace_trimmed_on_both_sides(self, events):
        events[0]["id"] = " Workshop "
        assert find_event(events, "workshop  ").name == "Workshop"

    def test_no_match_raises(self, events):
        with pytest.raises(EventNotFoundError):
            find_event(events, "gala")

    def test_malformed_records_skipped(self, events):
        events.insert(0, {"name": "no id"})
        assert find_event(events, "workshop").id == "workshop"


class TestResolveEvent:
    """Test resolve_event outcomes."""

    def test_found(self, events):
        with patch("event_registration.services.event_resolver.fetch_company_events", return_value=events):
            resolution = resolve_event("Acme", "Launch-Party")

        assert resolution.outcome == FOUND
        assert resolution.event.id == "launch-party"

    def test_forbidden_is_company_disabled(self):
        with patch("event_registration.services.event_resolver.fetch_company_events",
                   side_effect=CompanyDisabledError("Company is disabled", status_code=403)):
            resolution = resolve_event("Acme", "anything")

        assert resolution.outcome == COMPANY_DISABLED
        assert resolution.event is None
        assert resolution.message == ""

    def test_api_failure_is_not_found(self):
        with patch("event_registration.services.event_resolver.fetch_company_events",
                   side_effect=EventsApiError("boom", status_code=500)):
            resolution = resolve_event("Acme", "launch-party")

        assert resolution.outcome == NOT_FOUND
        assert resolution.message == NOT_AVAILABLE_MESSAGE

    def test_missing_event_is_not_found(self, events):
        with patch("event_registration.services.event_resolver.fetch_company_events", return_value=events):
            resolution = resolve_event("Acme", "gala")

        assert resolution.outcome == NOT_FOUND
        assert resolution.message == NOT_AVAILABLE_MESSAGE

    def test_event_disabled(self, events):
        events[1]["status"] = "disabled"
        with patch("event_registration.services.event_resolver.fetch_company_events", return_value=events):
            resolution = resolve_event("Acme", "launch-party")

        assert resolution.outcome == EVENT_DISABLED
        assert resolution.event.id == "launch-party"
        assert resolution.message == ""

    def test_company_flag_on_event(self, events):
        events[1]["companyStatus"] = "disabled"
        with patch("event_registration.services.event_resolver.fetch_company_events", return_value=events):
            resolution = resolve_event("Acme", "launch-party")

        assert resolution.outcome == COMPANY_DISABLED
        assert resolution.event.id == "launch-party"
        assert resolution.message == ""

    def test_company_flag_wins_over_event_flag(self, events):
        events[1]["status"] = "disabled"
        events[1]["companyStatus"] = "disabled"
        with patch("event_registration.services.event_resolver.fetch_company_events", return_value=events):
            resolution = resolve_event("Acme", "launch-party")

        assert resolution.outcome == COMPANY_DISABLED
