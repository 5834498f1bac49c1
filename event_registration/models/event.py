"""Event data model."""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from event_registration.utils.date_utils import coerce_event_date

DISABLED = "disabled"


@dataclass(frozen=True)
class EventRef:
    """Read-only snapshot of an event as returned by the events API."""

    id: str
    name: str
    image: Optional[str] = None
    description: str = ""
    date: str = ""
    registrations: int = 0
    status: Optional[str] = None
    company_status: Optional[str] = None

    def __post_init__(self):
        """Validate event data after initialization."""
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError("Event ID cannot be empty")

        if self.registrations < 0:
            raise ValueError("Registrations count cannot be negative")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EventRef":
        """
        Build an EventRef from an API event record.

        Args:
            data: Dictionary with id, name, image, description, date,
                  registrations and optional status / companyStatus

        Returns:
            EventRef instance

        Raises:
            ValueError: If the record is not a dict or has no usable id
        """
        if not isinstance(data, dict):
            raise ValueError("Event record must be a dictionary")

        event_id = data.get("id")
        if not isinstance(event_id, str):
            raise ValueError(f"Event record has no string id: {event_id!r}")

        try:
            registrations = max(int(data.get("registrations") or 0), 0)
        except (TypeError, ValueError):
            registrations = 0

        return cls(
            id=event_id,
            name=data.get("name") or event_id,
            image=data.get("image") or None,
            description=data.get("description") or "",
            date=coerce_event_date(data.get("date")),
            registrations=registrations,
            status=data.get("status"),
            company_status=data.get("companyStatus"),
        )

    @property
    def is_disabled(self) -> bool:
        """Check if registration for this event is switched off."""
        return self.status == DISABLED

    @property
    def is_company_disabled(self) -> bool:
        """Check if the owning company is switched off."""
        return self.company_status == DISABLED
