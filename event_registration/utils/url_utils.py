"""Page address helpers."""
from typing import Mapping, Tuple
from urllib.parse import quote

from event_registration.utils.config import get_event_site_url


def read_page_address(query_params: Mapping[str, str]) -> Tuple[str, str]:
    """
    Read the company and event from the page's query parameters.

    Args:
        query_params: st.query_params or any mapping; Streamlit has already
                      percent-decoded the values once

    Returns:
        Tuple of (company_name, event_id), empty strings if missing
    """
    company_name = query_params.get("company") or ""
    event_id = query_params.get("event") or ""
    return company_name, event_id


def build_event_page_url(company_name: str, event_id: str) -> str:
    """
    Build the link back to the public event page.

    Args:
        company_name: Decoded company name
        event_id: Decoded event identifier

    Returns:
        "{EVENT_SITE_URL}/{company}/{event}" with both segments percent-encoded
    """
    return f"{get_event_site_url()}/{quote(company_name, safe='')}/{quote(event_id, safe='')}"
