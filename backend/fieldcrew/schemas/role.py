"""
Role Schemas
"""
from typing import Optional, List
from pydantic import Field, field_validator

from fieldcrew.config.permissions import ALL_PERMISSIONS
from fieldcrew.schemas.collaborator import CamelModel


def _check_permission_keys(keys):
    unknown = [key for key in keys if key not in ALL_PERMISSIONS]
    if unknown:
        raise ValueError(f"Unknown permissions: {', '.join(unknown)}")
    return keys


class RoleCreate(CamelModel):
    """Role creation schema"""
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    is_admin: bool = False
    permissions: List[str] = []

    @field_validator("permissions")
    @classmethod
    def validate_permissions(cls, v):
        return _check_permission_keys(v)


class RoleUpdate(CamelModel):
    """Role update schema"""
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    is_admin: Optional[bool] = None
    permissions: Optional[List[str]] = None

    @field_validator("permissions")
    @classmethod
    def validate_permissions(cls, v):
        if v is None:
            return v
        return _check_permission_keys(v)
