"""
Collaborator form validation.

validate_collaborator_form() reports problems as {"dotted.wire.path": message}
instead of raising; only a payload that is not an object at all is rejected
with InvalidFormError.
"""
from typing import Any, Dict, Mapping

from pydantic import ValidationError

from fieldcrew.config.permissions import DEFAULT_NOTIFICATION_SETTINGS, DEFAULT_WORK_SCHEDULE
from fieldcrew.exceptions import InvalidFormError
from fieldcrew.schemas.collaborator import CollaboratorForm, CollaboratorProfile
from fieldcrew.services.permission_service import new_matrix


def _error_path(loc) -> str:
    return ".".join(str(part) for part in loc) or "__root__"


def _error_message(error: Dict[str, Any]) -> str:
    # Messages raised from our own validators come through as "Value error, ..."
    if error["type"] == "value_error" and "error" in error.get("ctx", {}):
        return str(error["ctx"]["error"])
    return error["msg"]


def errors_to_map(exc: ValidationError) -> Dict[str, str]:
    """First error message per field path."""
    errors: Dict[str, str] = {}
    for error in exc.errors():
        errors.setdefault(_error_path(error["loc"]), _error_message(error))
    return errors


def parse_collaborator_form(data: Any, require_phone: bool = False) -> CollaboratorForm:
    """Validate and return the form model; raises ValidationError on bad fields."""
    if not isinstance(data, Mapping):
        raise InvalidFormError(type(data).__name__)
    return CollaboratorForm.model_validate(dict(data), context={"require_phone": require_phone})


def validate_collaborator_form(data: Any, require_phone: bool = False) -> Dict[str, str]:
    """Return field errors for a submitted collaborator form ({} when valid)."""
    try:
        parse_collaborator_form(data, require_phone=require_phone)
    except ValidationError as e:
        return errors_to_map(e)
    return {}


def new_collaborator_form_defaults() -> Dict[str, Any]:
    """Blank creation form: nothing granted, default schedule and notifications."""
    return {
        "fullName": "",
        "email": "",
        "phone": "",
        "role": "",
        "isActive": True,
        "mobilePermissions": new_matrix(),
        "workSchedule": {day: dict(entry) for day, entry in DEFAULT_WORK_SCHEDULE.items()},
        "notificationSettings": dict(DEFAULT_NOTIFICATION_SETTINGS),
        "skills": [],
        "certifications": [],
        "emergencyContact": None,
        "notes": "",
    }


def form_from_profile(profile: CollaboratorProfile) -> Dict[str, Any]:
    """Edit form prefilled from a reconciled profile."""
    data = profile.model_dump(
        by_alias=True,
        include={
            "full_name", "email", "phone", "role", "is_active", "mobile_permissions",
            "work_schedule", "notification_settings", "skills", "certifications",
            "emergency_contact", "notes",
        },
    )
    for field in ("email", "phone", "notes"):
        if data[field] is None:
            data[field] = ""
    return data
