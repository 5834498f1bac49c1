"""Registration form data model."""
from dataclasses import asdict, dataclass
from typing import Any, Dict

GENDER_OPTIONS = ("male", "female")
STATUS_OPTIONS = ("student", "graduate")

CHOICE_FIELDS = {
    "gender": GENDER_OPTIONS,
    "status": STATUS_OPTIONS,
}

# Python field name -> API body key
PAYLOAD_KEYS = {
    "name": "name",
    "phone": "phone",
    "email": "email",
    "gender": "gender",
    "college": "college",
    "status": "status",
    "national_id": "nationalId",
}


@dataclass
class RegistrationForm:
    """Values typed into the registration form."""

    name: str = ""
    phone: str = ""
    email: str = ""
    gender: str = GENDER_OPTIONS[0]
    college: str = ""
    status: str = STATUS_OPTIONS[0]
    national_id: str = ""

    def __post_init__(self):
        """Validate choice fields after initialization."""
        for field_name, options in CHOICE_FIELDS.items():
            value = getattr(self, field_name)
            if value not in options:
                raise ValueError(f"{field_name} must be one of {list(options)}, got: {value}")

    def set_value(self, field_name: str, value: str) -> None:
        """
        Update one field.

        Raises:
            ValueError: If the field is unknown or a choice value is not allowed
        """
        if field_name not in PAYLOAD_KEYS:
            raise ValueError(f"Unknown form field: {field_name}")

        options = CHOICE_FIELDS.get(field_name)
        if options is not None and value not in options:
            raise ValueError(f"{field_name} must be one of {list(options)}, got: {value}")

        setattr(self, field_name, value)

    def reset(self) -> None:
        """Restore every field to its empty default."""
        for field_name, value in asdict(RegistrationForm()).items():
            setattr(self, field_name, value)

    def to_payload(self, company_name: str, event_name: str) -> Dict[str, Any]:
        """
        Build the JSON body for the registration endpoint.

        Args:
            company_name: Company the event belongs to
            event_name: Exact event id as returned by the events API

        Returns:
            Dict with companyName, eventName and every form field
        """
        payload = {"companyName": company_name, "eventName": event_name}
        for field_name, key in PAYLOAD_KEYS.items():
            payload[key] = getattr(self, field_name)
        return payload
