"""Schemas for the mobile permission registry and capability matrix."""
from typing import Dict, List
from pydantic import BaseModel, StrictBool, create_model

from fieldcrew.config.permissions import ALL_PERMISSIONS


class PermissionKeyInfo(BaseModel):
    key: str
    label: str
    category: str


class PermissionCategoryInfo(BaseModel):
    key: str
    label: str
    permissions: List[str]


class PermissionCatalogResponse(BaseModel):
    categories: List[PermissionCategoryInfo]
    permissions: List[PermissionKeyInfo]


class CollaboratorPermissionsResponse(BaseModel):
    matrix: Dict[str, bool]
    granted: List[str]


# One required strict boolean per registered key; built from the registry so
# the form shape can never drift from it.
CapabilityMatrixForm = create_model(
    "CapabilityMatrixForm",
    **{key: (StrictBool, ...) for key in ALL_PERMISSIONS},
)
