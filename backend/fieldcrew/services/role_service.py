"""
Role Service
Role templates (role -> permission keys) managed through the API. Roles are
read back as RolePermissionBinding objects, the same shape attached to
collaborator profiles.
"""
import logging
from typing import Any, List

from fieldcrew.schemas.collaborator import CollaboratorProfile, RolePermissionBinding
from fieldcrew.schemas.role import RoleCreate, RoleUpdate
from fieldcrew.services.api_client import ApiClient
from fieldcrew.services.collaborator_normalizer import reconcile_many, reconcile_role_binding
from fieldcrew.exceptions import CollaboratorServiceError

logger = logging.getLogger(__name__)


class RoleService(ApiClient):

    def _binding(self, operation: str, data: Any) -> RolePermissionBinding:
        binding = reconcile_role_binding(data)
        if binding is None:
            raise CollaboratorServiceError(operation, "Response is not a role")
        return binding

    async def list_roles(self) -> List[RolePermissionBinding]:
        """All roles; entries without a usable id or name are skipped."""
        data = await self._request("list roles", "GET", "/roles")
        if not isinstance(data, list):
            return []
        bindings = [reconcile_role_binding(item) for item in data]
        return [binding for binding in bindings if binding is not None]

    async def create_role(self, role: RoleCreate) -> RolePermissionBinding:
        data = await self._request("create role", "POST", "/roles", json=role.model_dump(by_alias=True))
        binding = self._binding("create role", data)
        logger.info("Created role %s (%s)", binding.role_id, binding.role_name)
        return binding

    async def update_role(self, role_id: int, role: RoleUpdate) -> RolePermissionBinding:
        data = await self._request(
            "update role", "PUT", f"/roles/{role_id}",
            json=role.model_dump(by_alias=True, exclude_unset=True),
        )
        binding = self._binding("update role", data)
        logger.info("Updated role %s", role_id)
        return binding

    async def delete_role(self, role_id: int) -> Any:
        data = await self._request("delete role", "DELETE", f"/roles/{role_id}")
        logger.info("Deleted role %s", role_id)
        return data

    async def list_role_collaborators(self, role_id: int) -> List[CollaboratorProfile]:
        """Collaborators holding a role, reconciled."""
        data = await self._request("list role collaborators", "GET", f"/roles/{role_id}/collaborators")
        return reconcile_many(data)


# Singleton
role_service = RoleService()
