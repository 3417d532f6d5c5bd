"""
Permission Service
Category resolution, bulk toggles and permission checks over a collaborator's
capability matrix ({permission_key: granted}).

All functions are pure: matrices passed in are never mutated and unknown
categories or keys degrade to "no match" instead of raising. The single
exception is has_permission(), which refuses keys outside the registry.
"""
from typing import Dict, Iterable, List, Optional

from fieldcrew.config.permissions import (
    ALL_PERMISSIONS, CATEGORY_ALIASES, CATEGORY_KEYS, PERMISSION_CATEGORIES,
)
from fieldcrew.exceptions import UnknownPermissionError
from fieldcrew.schemas.collaborator import CollaboratorProfile, RolePermissionBinding
from fieldcrew.schemas.permission import (
    CollaboratorPermissionsResponse, PermissionCatalogResponse, PermissionCategoryInfo,
    PermissionKeyInfo,
)

UNGROUPED = "ungrouped"


def resolve_category(key: str) -> Optional[str]:
    """Return the category of a permission key, or None if it is not registered."""
    info = ALL_PERMISSIONS.get(key)
    return info["category"] if info else None


def normalize_category(name: str) -> Optional[str]:
    """Resolve a category name, label or alias (case-insensitive) to its key."""
    if not isinstance(name, str):
        return None
    candidate = name.strip().lower()
    if candidate in PERMISSION_CATEGORIES:
        return candidate
    return CATEGORY_ALIASES.get(candidate)


def keys_for_category(name: str) -> List[str]:
    """Permission keys of a category in registry order; [] for unknown categories."""
    category = normalize_category(name)
    if category is None:
        return []
    return list(CATEGORY_KEYS[category])


def group_by_category(matrix: Dict[str, bool]) -> Dict[str, Dict[str, bool]]:
    """Split a matrix into {category: {key: granted}}.

    Keys the registry does not know end up under "ungrouped".
    """
    grouped: Dict[str, Dict[str, bool]] = {category: {} for category in PERMISSION_CATEGORIES}
    for key, granted in matrix.items():
        category = resolve_category(key) or UNGROUPED
        grouped.setdefault(category, {})[key] = granted
    return grouped


def new_matrix(value: bool = False) -> Dict[str, bool]:
    """Fresh matrix with every registered key set to value."""
    return {key: value for key in ALL_PERMISSIONS}


def set_all(matrix: Dict[str, bool], value: bool) -> Dict[str, bool]:
    """Set every registered key to value.

    The input matrix is not read or merged: the result is always the full
    registry with every key set to value, whatever keys matrix had.
    """
    return new_matrix(value)


def set_category(matrix: Dict[str, bool], category: str, value: bool) -> Dict[str, bool]:
    """Set the keys of one category to value, leaving all other keys untouched.

    The result has exactly the keys of the input. An unknown category returns
    an unchanged copy.
    """
    category_keys = set(keys_for_category(category))
    return {
        key: (value if key in category_keys else granted)
        for key, granted in matrix.items()
    }


def granted_keys(matrix: Dict[str, bool]) -> List[str]:
    """Registered keys granted in the matrix, in registry order."""
    return [key for key in ALL_PERMISSIONS if matrix.get(key) is True]


def has_permission(matrix: Dict[str, bool], key: str) -> bool:
    if key not in ALL_PERMISSIONS:
        raise UnknownPermissionError(key)
    return matrix.get(key) is True


def has_any_permission(matrix: Dict[str, bool], keys: Iterable[str]) -> bool:
    return any(matrix.get(key) is True for key in keys)


def has_all_permissions(matrix: Dict[str, bool], keys: Iterable[str]) -> bool:
    return all(matrix.get(key) is True for key in keys)


def has_category_permission(matrix: Dict[str, bool], category: str) -> bool:
    """True if at least one key of the category is granted."""
    return has_any_permission(matrix, keys_for_category(category))


def category_state(matrix: Dict[str, bool], category: str) -> str:
    """Summarise a category as "all", "some" or "none" granted."""
    keys = [key for key in keys_for_category(category) if key in matrix]
    granted = sum(1 for key in keys if matrix[key] is True)
    if keys and granted == len(keys):
        return "all"
    if granted:
        return "some"
    return "none"


def apply_role_bindings(
    matrix: Dict[str, bool], bindings: Iterable[RolePermissionBinding]
) -> Dict[str, bool]:
    """Layer the grants of role bindings on top of a matrix (grant-only)."""
    result = dict(matrix)
    for binding in bindings:
        for key in binding.permissions:
            if key in ALL_PERMISSIONS:
                result[key] = True
    return result


def effective_permissions(profile: CollaboratorProfile) -> List[str]:
    """Keys granted by the matrix or by any attached role binding, in registry order."""
    matrix = apply_role_bindings(profile.mobile_permissions, profile.role_permissions)
    return granted_keys(matrix)


def describe_permissions(profile: CollaboratorProfile) -> CollaboratorPermissionsResponse:
    return CollaboratorPermissionsResponse(
        matrix=dict(profile.mobile_permissions),
        granted=effective_permissions(profile),
    )


def get_permission_catalog() -> PermissionCatalogResponse:
    """Registry in display shape: categories with their keys, plus every key's label."""
    categories = [
        PermissionCategoryInfo(key=category, label=info["label"], permissions=list(CATEGORY_KEYS[category]))
        for category, info in PERMISSION_CATEGORIES.items()
    ]
    permissions = [
        PermissionKeyInfo(key=key, label=info["label"], category=info["category"])
        for key, info in ALL_PERMISSIONS.items()
    ]
    return PermissionCatalogResponse(categories=categories, permissions=permissions)
