"""Event registration page UI component."""
import logging

import streamlit as st

from event_registration.models.event import EventRef
from event_registration.models.registration_form import GENDER_OPTIONS, STATUS_OPTIONS
from event_registration.models.submission_state import (
    BLOCKING_STATES,
    EventDisabled,
    FetchError,
    Loading,
    OrgDisabled,
    Success,
)
from event_registration.services.form_controller import RegistrationFormController
from event_registration.ui.html_utils import html_block, multiline_text, text
from event_registration.utils.date_utils import format_event_date
from event_registration.utils.url_utils import build_event_page_url

logger = logging.getLogger(__name__)

CONTROLLER_KEY = "registration_controller"
WIDGET_PREFIX = "registration_field_"

TEXT_FIELD_LABELS = {
    "name": "Name - الاسم 👋",
    "phone": "Phone Number - رقم الهاتف 📱",
    "email": "Your Email - البريد الأليكتروني 📧",
    "college": "College - الجامعه 🎓",
    "national_id": "National ID - الرقم القومي 🪪",
}

CHOICE_LABELS = {
    "male": "Male 🙎🏻‍♂️",
    "female": "Female 🙍🏻‍♀️",
    "student": "Student 👨🏻‍💻",
    "graduate": "Graduate 🎓️",
}

DISABLED_COPY = {
    "event": {
        "title": "Registration Disabled",
        "body": "Registration for this event is currently disabled. "
                "Please contact the organizer for more information.",
    },
    "company": {
        "title": "Company Inactive",
        "body": "This company's events are currently not available. "
                "Please contact the administrator for more information.",
    },
}

NATIONAL_ID_NOTE = "Your National ID will only be visible to administrators."


def _widget_key(field_name: str) -> str:
    return f"{WIDGET_PREFIX}{field_name}"


def _clear_widget_state() -> None:
    """Drop every form widget value from session state."""
    for key in [k for k in st.session_state.keys() if str(k).startswith(WIDGET_PREFIX)]:
        del st.session_state[key]


def _get_controller(company_name: str, event_id: str) -> RegistrationFormController:
    """Return the page controller, starting over when the address changes."""
    controller = st.session_state.get(CONTROLLER_KEY)
    if controller is None or controller.key != (company_name, event_id):
        logger.info("Opening registration page for %s/%s", company_name, event_id)
        controller = RegistrationFormController(company_name, event_id)
        st.session_state[CONTROLLER_KEY] = controller
        _clear_widget_state()
    return controller


def _on_field_change(controller: RegistrationFormController, field_name: str) -> None:
    controller.change_field(field_name, st.session_state[_widget_key(field_name)])


def _on_submit_click(controller: RegistrationFormController) -> None:
    controller.begin_submit()


def _inject_page_styles():
    """Inject CSS for the registration card."""
    st.markdown(
        html_block(
            """
            <style>
            .reg-event-image {
                width: 100%;
                height: 16rem;
                object-fit: cover;
                border-radius: 12px 12px 0 0;
                transition: transform 0.5s ease-in-out;
            }
            .reg-event-image:hover {
                transform: scale(1.05) rotate(-1deg);
            }
            .reg-title {
                text-align: center;
                font-size: 30px;
                font-weight: 700;
                color: #f8fafc;
                margin-bottom: 4px;
            }
            .reg-subtitle {
                text-align: center;
                font-size: 20px;
                color: #cbd5e1;
                margin-bottom: 8px;
            }
            .reg-count {
                text-align: center;
                font-size: 14px;
                color: #94a3b8;
                margin-bottom: 24px;
            }
            .reg-field-error {
                color: #f87171;
                font-size: 12px;
                font-style: italic;
                margin-top: -8px;
                margin-bottom: 12px;
            }
            .reg-blocking {
                background: #353c49;
                border-radius: 12px;
                padding: 32px;
                text-align: center;
            }
            .reg-blocking h2 {
                color: #f87171;
            }
            .reg-blocking p {
                color: #cbd5e1;
            }
            .reg-details span {
                font-weight: 600;
                font-size: 20px;
            }
            </style>
            """
        ),
        unsafe_allow_html=True,
    )


def _event_image_html(event: EventRef, company_name: str, event_id: str) -> str:
    """Return the event banner image HTML, or "" if the event has no image."""
    if not event.image:
        return ""

    alt = text(f"{company_name} - {event_id} Event")
    return (
        f'<img src="{text(event.image)}" alt="{alt}" class="reg-event-image" '
        f"onerror=\"this.style.display='none'\" />"
    )


def _page_header_html(event: EventRef, company_name: str) -> str:
    """Return the title block shown above the form and the success view."""
    noun = "registration" if event.registrations == 1 else "registrations"
    return html_block(
        f"""
        <div class="reg-title">Register for {text(event.name)}</div>
        <div class="reg-subtitle">Hosted by {text(company_name)}</div>
        <div class="reg-count">👥 {event.registrations} {noun} so far</div>
        """
    )


def _field_error_html(message: str) -> str:
    return f'<p class="reg-field-error">{text(message)}</p>'


def _blocking_html(title: str, body: str) -> str:
    """Return the card shown when the form cannot be used."""
    return html_block(
        f"""
        <div class="reg-blocking">
            <h2>{text(title)}</h2>
            <p>{text(body)}</p>
        </div>
        """
    )


def _event_details_html(event: EventRef) -> str:
    """Return the event details block of the success view."""
    description = event.description or "No description available."
    return html_block(
        f"""
        <div class="reg-details">
            <h3>Event Details:</h3>
            <p><span>Date :</span> {text(format_event_date(event.date))}</p>
            <p><span>Description :</span> {multiline_text(description)}</p>
        </div>
        """
    )


def _render_blocking_view(controller: RegistrationFormController, event_url: str) -> None:
    state = controller.state

    if isinstance(state, FetchError):
        st.error(state.message)
    elif isinstance(state, EventDisabled):
        copy = DISABLED_COPY["event"]
        st.markdown(_blocking_html(copy["title"], copy["body"]), unsafe_allow_html=True)
    elif isinstance(state, OrgDisabled):
        copy = DISABLED_COPY["company"]
        st.markdown(_blocking_html(copy["title"], copy["body"]), unsafe_allow_html=True)

    st.link_button("Return to Event", event_url)


def _render_success(controller: RegistrationFormController, event_url: str) -> None:
    st.success("**Registration Successful!**\n\nThank you for registering for this event.")
    st.markdown(_event_details_html(controller.event), unsafe_allow_html=True)
    st.link_button("Return to Event", event_url)


def _complete_submission(controller: RegistrationFormController) -> None:
    """Send the pending registration, then rerun to show its outcome."""
    with st.spinner("Submitting..."):
        success, _ = controller.finish_submit()
    if success:
        _clear_widget_state()
    st.rerun()


def _render_form(controller: RegistrationFormController, event_url: str) -> None:
    disabled = controller.is_submitting
    banner = getattr(controller.state, "banner", "")
    if banner:
        st.error(banner)

    def text_field(field_name: str, input_type: str = "default") -> None:
        key = _widget_key(field_name)
        st.session_state.setdefault(key, getattr(controller.form, field_name))
        st.text_input(
            TEXT_FIELD_LABELS[field_name],
            key=key,
            type=input_type,
            on_change=_on_field_change,
            args=(controller, field_name),
            disabled=disabled,
        )
        message = controller.errors.get(field_name)
        if message:
            st.markdown(_field_error_html(message), unsafe_allow_html=True)

    def choice_field(field_name: str, label: str, options) -> None:
        key = _widget_key(field_name)
        st.session_state.setdefault(key, getattr(controller.form, field_name))
        st.selectbox(
            label,
            options=list(options),
            format_func=lambda opt: CHOICE_LABELS.get(opt, opt),
            key=key,
            on_change=_on_field_change,
            args=(controller, field_name),
            disabled=disabled,
        )

    text_field("name")
    text_field("phone")
    text_field("email")
    choice_field("gender", "Gender", GENDER_OPTIONS)
    text_field("college")
    choice_field("status", "Status", STATUS_OPTIONS)
    text_field("national_id")
    st.caption(NATIONAL_ID_NOTE)

    back_col, submit_col = st.columns([1, 1], gap="small")
    with back_col:
        st.link_button("Back to Event", event_url, disabled=disabled)
    with submit_col:
        st.button(
            "Submitting..." if disabled else "Register for Event",
            key="registration_submit",
            type="primary",
            use_container_width=True,
            disabled=disabled,
            on_click=_on_submit_click,
            args=(controller,),
        )

    if disabled:
        _complete_submission(controller)


def render_registration_page(company_name: str, event_id: str):
    """
    Render the registration page for one event.

    Args:
        company_name: Decoded company name from the page address
        event_id: Decoded event identifier from the page address
    """
    controller = _get_controller(company_name, event_id)
    event_url = build_event_page_url(company_name, event_id)

    _inject_page_styles()

    if isinstance(controller.state, Loading):
        with st.spinner("Loading..."):
            controller.load()

    if isinstance(controller.state, BLOCKING_STATES):
        _render_blocking_view(controller, event_url)
        return

    event = controller.event
    image_html = _event_image_html(event, company_name, event_id)
    if image_html:
        st.markdown(image_html, unsafe_allow_html=True)
    st.markdown(_page_header_html(event, company_name), unsafe_allow_html=True)

    if isinstance(controller.state, Success):
        _render_success(controller, event_url)
    else:
        _render_form(controller, event_url)
