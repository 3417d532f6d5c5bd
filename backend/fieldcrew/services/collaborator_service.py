"""
Collaborator Service
CRUD against the collaborator management API with a cached list snapshot.

The cached list is never patched in place: every successful mutation drops
it and the next list call refetches everything. Failed calls leave the cache
as it was so the same action can simply be retried.
"""
import asyncio
import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from fieldcrew.schemas.collaborator import CollaboratorForm, CollaboratorProfile
from fieldcrew.services.api_client import ApiClient
from fieldcrew.services.collaborator_normalizer import reconcile, reconcile_many
from fieldcrew.services.validation_service import parse_collaborator_form

logger = logging.getLogger(__name__)

FormInput = Union[CollaboratorForm, Mapping[str, Any]]


def _form_payload(form: FormInput) -> Dict[str, Any]:
    if not isinstance(form, CollaboratorForm):
        form = parse_collaborator_form(form)
    return form.model_dump(by_alias=True)


def filter_collaborators(
    collaborators: List[CollaboratorProfile],
    search: str = "",
    role: str = "all",
    status: str = "all",
) -> List[CollaboratorProfile]:
    """
    Filter collaborators the way the admin list does.

    Args:
        collaborators: Reconciled collaborators
        search: Case-insensitive substring matched against name, email and role
        role: Exact role, or "all"
        status: "active", "inactive" or "all"

    Returns:
        Matching collaborators in their original order
    """
    term = (search or "").lower()
    result = []
    for collaborator in collaborators:
        matches_search = (
            term in collaborator.full_name.lower()
            or term in (collaborator.email or "").lower()
            or term in collaborator.role.lower()
        )
        matches_role = role == "all" or collaborator.role == role
        matches_status = (
            status == "all"
            or (status == "active" and collaborator.is_active)
            or (status == "inactive" and not collaborator.is_active)
        )
        if matches_search and matches_role and matches_status:
            result.append(collaborator)
    return result


class CollaboratorService(ApiClient):
    """Repository for collaborators behind the REST API"""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._cache: Optional[List[CollaboratorProfile]] = None
        self._lock = asyncio.Lock()
        # Bumped by every invalidation; a fetch that started under an older
        # generation must not be cached.
        self._generation = 0

    @property
    def is_cached(self) -> bool:
        return self._cache is not None

    def invalidate(self) -> None:
        """Drop the cached list; the next list call refetches."""
        self._cache = None
        self._generation += 1

    def _snapshot(self) -> List[CollaboratorProfile]:
        return [collaborator.model_copy(deep=True) for collaborator in self._cache or []]

    async def list_collaborators(self, force_refresh: bool = False) -> List[CollaboratorProfile]:
        """
        All collaborators, reconciled.

        Served from the cache when possible; concurrent callers share a single
        fetch. A list fetched while a mutation completed is returned
        but not cached, so the following call refetches.
        """
        async with self._lock:
            if self._cache is None or force_refresh:
                generation = self._generation
                data = await self._request("list collaborators", "GET", "/collaborators")
                collaborators = reconcile_many(data)
                logger.debug("Fetched %d collaborators", len(collaborators))
                if generation != self._generation:
                    logger.debug("Collaborators changed during fetch, result not cached")
                    return collaborators
                self._cache = collaborators
            return self._snapshot()

    async def get_collaborator(self, collaborator_id: int) -> Optional[CollaboratorProfile]:
        """Look up one collaborator in the (possibly refreshed) list."""
        for collaborator in await self.list_collaborators():
            if collaborator.id == collaborator_id:
                return collaborator
        return None

    async def create_collaborator(self, form: FormInput) -> CollaboratorProfile:
        payload = _form_payload(form)
        data = await self._request("create collaborator", "POST", "/collaborators", json=payload)
        self.invalidate()
        created = reconcile(data)
        logger.info("Created collaborator %s (%s)", created.id, created.full_name)
        return created

    async def update_collaborator(self, collaborator_id: int, form: FormInput) -> CollaboratorProfile:
        payload = _form_payload(form)
        data = await self._request(
            "update collaborator", "PUT", f"/collaborators/{collaborator_id}", json=payload
        )
        self.invalidate()
        updated = reconcile(data)
        logger.info("Updated collaborator %s", collaborator_id)
        return updated

    async def delete_collaborator(self, collaborator_id: int) -> Any:
        """Delete a collaborator and return the API's acknowledgement body."""
        data = await self._request("delete collaborator", "DELETE", f"/collaborators/{collaborator_id}")
        self.invalidate()
        logger.info("Deleted collaborator %s", collaborator_id)
        return data


# Singleton
collaborator_service = CollaboratorService()
