"""
Collaborator Normalizer
Turns loosely-typed collaborator records returned by the API into fully
populated CollaboratorProfile objects.

The normalizer never rejects a record. Missing, null or mistyped fields are
replaced by their defaults:

- the capability matrix is defaulted key by key, so a partial matrix keeps
  the keys it has;
- the work schedule and notification settings are all-or-nothing: a usable
  object is taken as-is (a monday-only schedule stays monday-only), anything
  else is replaced by the full default.
"""
import logging
import math
from typing import Any, Dict, List, Mapping, Optional

from pydantic import TypeAdapter, ValidationError

from fieldcrew.config import settings
from fieldcrew.config.permissions import (
    ALL_PERMISSIONS, DEFAULT_NOTIFICATION_SETTINGS, DEFAULT_WORK_SCHEDULE, WEEKDAYS,
)
from fieldcrew.schemas.collaborator import (
    CollaboratorProfile, EmergencyContact, NotificationSettings, RolePermissionBinding,
    WeekdaySchedule,
)
from fieldcrew.utils.time_helpers import parse_timestamp, utcnow

logger = logging.getLogger(__name__)

UNKNOWN_NAME = "Unknown"

_work_schedule_adapter = TypeAdapter(Dict[str, WeekdaySchedule])


def default_work_schedule() -> Dict[str, WeekdaySchedule]:
    return {day: WeekdaySchedule.model_validate(DEFAULT_WORK_SCHEDULE[day]) for day in WEEKDAYS}


def default_notification_settings() -> NotificationSettings:
    return NotificationSettings.model_validate(DEFAULT_NOTIFICATION_SETTINGS)


def _text(value: Any) -> Optional[str]:
    """Non-empty string or None."""
    if isinstance(value, str) and value:
        return value
    return None


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        as_float = float(value)
    except OverflowError:
        return None
    if not math.isfinite(as_float):
        return None
    return value


def _identifier(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    return 0


def _string_list(value: Any, field: str) -> List[str]:
    if not isinstance(value, list):
        if value is not None:
            logger.debug("Ignoring non-list %s: %r", field, value)
        return []
    return [item for item in value if isinstance(item, str)]


def _capability_matrix(value: Any) -> Dict[str, bool]:
    if not isinstance(value, Mapping):
        value = {}
    matrix = {}
    for key in ALL_PERMISSIONS:
        granted = value.get(key)
        matrix[key] = granted if isinstance(granted, bool) else False
    return matrix


def _work_schedule(value: Any) -> Dict[str, WeekdaySchedule]:
    if value is None:
        return default_work_schedule()
    if isinstance(value, Mapping):
        try:
            return _work_schedule_adapter.validate_python(dict(value))
        except ValidationError as e:
            logger.debug("Malformed workSchedule, using defaults: %s", e.errors())
    else:
        logger.debug("Ignoring non-object workSchedule: %r", value)
    return default_work_schedule()


def _notification_settings(value: Any) -> NotificationSettings:
    if value is None:
        return default_notification_settings()
    if isinstance(value, Mapping):
        try:
            return NotificationSettings.model_validate(dict(value))
        except ValidationError as e:
            logger.debug("Malformed notificationSettings, using defaults: %s", e.errors())
    else:
        logger.debug("Ignoring non-object notificationSettings: %r", value)
    return default_notification_settings()


def reconcile_role_binding(record: Any) -> Optional[RolePermissionBinding]:
    """
    Read a role binding, or a role as returned by /roles.

    Accepts roleId/roleName or id/name, and permissions either as a list of
    keys or as a {key: granted} object. Returns None when no usable id or
    name is present.
    """
    if not isinstance(record, Mapping):
        return None
    permissions = record.get("permissions")
    if isinstance(permissions, Mapping):
        permissions = [key for key, granted in permissions.items() if granted is True]
    data = {
        "roleId": record.get("roleId", record.get("id")),
        "roleName": record.get("roleName", record.get("name")),
        "description": _text(record.get("description")) or "",
        "permissions": _string_list(permissions, "permissions"),
    }
    try:
        return RolePermissionBinding.model_validate(data)
    except ValidationError:
        logger.debug("Dropping malformed role binding: %r", record)
        return None


def _role_bindings(value: Any) -> List[RolePermissionBinding]:
    if not isinstance(value, list):
        return []
    bindings = [reconcile_role_binding(item) for item in value]
    return [binding for binding in bindings if binding is not None]


def _emergency_contact(value: Any) -> Optional[EmergencyContact]:
    if not isinstance(value, Mapping):
        return None
    try:
        return EmergencyContact.model_validate(dict(value))
    except ValidationError:
        logger.debug("Dropping malformed emergencyContact: %r", value)
        return None


def reconcile(record: Any) -> CollaboratorProfile:
    """Build a complete CollaboratorProfile from a raw API record."""
    if not isinstance(record, Mapping):
        logger.debug("Collaborator record is not an object, reconciling as empty: %r", record)
        record = {}

    total_jobs = _number(record.get("totalJobsCompleted"))
    rating = _number(record.get("averageRating"))

    return CollaboratorProfile(
        id=_identifier(record.get("id")),
        full_name=_text(record.get("fullName")) or _text(record.get("name")) or UNKNOWN_NAME,
        email=_text(record.get("email")),
        phone=_text(record.get("phone")),
        role=_text(record.get("role")) or settings.DEFAULT_ROLE,
        is_active=record.get("isActive") is True,
        mobile_permissions=_capability_matrix(record.get("mobilePermissions")),
        role_permissions=_role_bindings(record.get("rolePermissions")),
        work_schedule=_work_schedule(record.get("workSchedule")),
        notification_settings=_notification_settings(record.get("notificationSettings")),
        created_at=parse_timestamp(record.get("createdAt")) or utcnow(),
        last_active=parse_timestamp(record.get("lastActive")),
        notes=_text(record.get("notes")),
        total_jobs_completed=int(total_jobs) if total_jobs is not None else 0,
        average_rating=float(rating) if rating is not None else 0.0,
        skills=_string_list(record.get("skills"), "skills"),
        certifications=_string_list(record.get("certifications"), "certifications"),
        emergency_contact=_emergency_contact(record.get("emergencyContact")),
    )


def reconcile_many(records: Any) -> List[CollaboratorProfile]:
    """Reconcile a list response; anything but a list yields []."""
    if not isinstance(records, list):
        logger.debug("Collaborator list response is not a list: %r", type(records).__name__)
        return []
    return [reconcile(record) for record in records]
