"""Registration page states.

One class per state; ``tag`` names the state for logging and rendering.
"""
from dataclasses import dataclass
from typing import Union

from event_registration.models.event import EventRef


@dataclass(frozen=True)
class Loading:
    tag = "loading"


@dataclass(frozen=True)
class FetchError:
    message: str
    tag = "fetch-error"


@dataclass(frozen=True)
class EventDisabled:
    event: EventRef
    tag = "event-disabled"


@dataclass(frozen=True)
class OrgDisabled:
    tag = "org-disabled"


@dataclass(frozen=True)
class Editing:
    event: EventRef
    banner: str = ""
    tag = "editing"


@dataclass(frozen=True)
class Submitting:
    event: EventRef
    tag = "submitting"


@dataclass(frozen=True)
class Success:
    event: EventRef
    tag = "success"


SubmissionState = Union[Loading, FetchError, EventDisabled, OrgDisabled, Editing, Submitting, Success]

BLOCKING_STATES = (FetchError, EventDisabled, OrgDisabled)