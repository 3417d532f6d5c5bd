"""
Collaborator Schemas

Wire format is camelCase; models accept either the wire name or the
attribute name.
"""
from typing import Optional, List, Dict
from datetime import datetime
from pydantic import BaseModel, Field, StrictBool, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic.networks import validate_email

from fieldcrew.schemas.permission import CapabilityMatrixForm

TIME_OF_DAY_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class CamelModel(BaseModel):
    """Base schema serialising to camelCase"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class WeekdaySchedule(CamelModel):
    """Working hours for one weekday"""
    start: str
    end: str
    is_working: StrictBool


class NotificationSettings(CamelModel):
    """Notification channels and event subscriptions"""
    email_notifications: StrictBool
    sms_notifications: StrictBool
    push_notifications: StrictBool
    job_assignments: StrictBool
    status_updates: StrictBool
    deadline_reminders: StrictBool
    system_alerts: StrictBool


class EmergencyContact(CamelModel):
    name: str
    phone: str
    relationship: str


class RolePermissionBinding(CamelModel):
    """Role template attached to a collaborator (read-only copy)"""
    role_id: int
    role_name: str
    description: str = ""
    permissions: List[str] = []


class CollaboratorProfile(CamelModel):
    """Fully populated collaborator, as produced by the normalizer"""
    id: int = 0
    full_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    role: str
    is_active: bool = False
    mobile_permissions: Dict[str, bool]
    role_permissions: List[RolePermissionBinding] = []
    work_schedule: Dict[str, WeekdaySchedule]
    notification_settings: NotificationSettings
    created_at: datetime
    last_active: Optional[datetime] = None
    notes: Optional[str] = None
    total_jobs_completed: int = 0
    average_rating: float = 0.0
    skills: List[str] = []
    certifications: List[str] = []
    emergency_contact: Optional[EmergencyContact] = None


# Form schemas (user-submitted data, strict)

class WeekdayScheduleForm(CamelModel):
    start: str = Field(..., pattern=TIME_OF_DAY_PATTERN)
    end: str = Field(..., pattern=TIME_OF_DAY_PATTERN)
    is_working: StrictBool


class WorkScheduleForm(CamelModel):
    monday: WeekdayScheduleForm
    tuesday: WeekdayScheduleForm
    wednesday: WeekdayScheduleForm
    thursday: WeekdayScheduleForm
    friday: WeekdayScheduleForm
    saturday: WeekdayScheduleForm
    sunday: WeekdayScheduleForm


class NotificationSettingsForm(CamelModel):
    email_notifications: StrictBool
    sms_notifications: StrictBool
    push_notifications: StrictBool
    job_assignments: StrictBool
    status_updates: StrictBool
    deadline_reminders: StrictBool
    system_alerts: StrictBool


class CollaboratorForm(CamelModel):
    """Collaborator create/edit form.

    Pass ``context={"require_phone": True}`` when validating to make the
    phone number mandatory.
    """
    full_name: str
    email: Optional[str] = None
    phone: Optional[str] = Field(default=None, validate_default=True)
    role: str
    is_active: StrictBool
    mobile_permissions: CapabilityMatrixForm
    work_schedule: WorkScheduleForm
    notification_settings: NotificationSettingsForm
    skills: Optional[List[str]] = None
    certifications: Optional[List[str]] = None
    emergency_contact: Optional[EmergencyContact] = None
    notes: Optional[str] = None

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v):
        if len(v) < 2:
            raise ValueError("Name must be at least 2 characters")
        return v

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, v):
        if not v:
            return v
        try:
            validate_email(v)
        except ValueError:
            raise ValueError("Invalid email address")
        return v

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v, info: ValidationInfo):
        require_phone = bool(info.context and info.context.get("require_phone"))
        if not v:
            if require_phone:
                raise ValueError("Phone is required")
            return v
        if len(v) < 10:
            raise ValueError("Phone must be at least 10 characters")
        return v

    @field_validator("role")
    @classmethod
    def validate_role(cls, v):
        if len(v) < 1:
            raise ValueError("Role is required")
        return v
