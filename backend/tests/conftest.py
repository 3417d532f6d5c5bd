"""Pytest configuration and fixtures for fieldcrew.

HTTP tests run against FakeCollaboratorApi, an in-memory stand-in for the
external collaborator management service, wired in through
httpx.MockTransport. No network access is needed.
"""
import json
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from fieldcrew.services.collaborator_service import CollaboratorService
from fieldcrew.services.role_service import RoleService
from fieldcrew.services.validation_service import new_collaborator_form_defaults

BASE_URL = "http://testserver/api"
API_TOKEN = "test-token"


class FakeCollaboratorApi:
    """In-memory /collaborators and /roles endpoints."""

    def __init__(self) -> None:
        self.collaborators: Dict[int, Dict[str, Any]] = {}
        self.roles: Dict[int, Dict[str, Any]] = {}
        self.calls: List[Tuple[str, str]] = []
        self.bodies: List[Any] = []
        self.headers: List[httpx.Headers] = []
        self.fail_next: Optional[int] = None
        self.raise_next: Optional[Exception] = None
        self._next_id = 1

    def add_collaborator(self, record: Dict[str, Any]) -> Dict[str, Any]:
        record = dict(record)
        record.setdefault("id", self._allocate_id())
        self.collaborators[record["id"]] = record
        return record

    def add_role(self, record: Dict[str, Any]) -> Dict[str, Any]:
        record = dict(record)
        record.setdefault("id", self._allocate_id())
        self.roles[record["id"]] = record
        return record

    def count(self, method: str, path: str) -> int:
        return sum(1 for call in self.calls if call == (method, path))

    def _allocate_id(self) -> int:
        allocated = self._next_id
        self._next_id += 1
        return allocated

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls.append((request.method, path))
        self.headers.append(request.headers)
        body = json.loads(request.content) if request.content else None
        self.bodies.append(body)

        if self.raise_next is not None:
            exc, self.raise_next = self.raise_next, None
            raise exc
        if self.fail_next is not None:
            status_code, self.fail_next = self.fail_next, None
            return httpx.Response(status_code, json={"error": "boom"})

        parts = path.strip("/").split("/")[1:]
        if parts[0] == "collaborators":
            return self._collaborators(request.method, parts[1:], body)
        if parts[0] == "roles":
            return self._roles(request.method, parts[1:], body)
        return httpx.Response(404, json={"error": "Not found"})

    def _collaborators(self, method: str, rest: List[str], body: Any) -> httpx.Response:
        if not rest:
            if method == "GET":
                return httpx.Response(200, json=list(self.collaborators.values()))
            if method == "POST":
                record = self.add_collaborator({**body, "createdAt": "2024-05-01T08:30:00Z"})
                return httpx.Response(201, json=record)
        collaborator_id = int(rest[0])
        if collaborator_id not in self.collaborators:
            return httpx.Response(404, json={"error": "Collaborator not found"})
        if method == "PUT":
            record = {**self.collaborators[collaborator_id], **body, "id": collaborator_id}
            self.collaborators[collaborator_id] = record
            return httpx.Response(200, json=record)
        if method == "DELETE":
            del self.collaborators[collaborator_id]
            return httpx.Response(200, json={"success": True})
        return httpx.Response(405)

    def _roles(self, method: str, rest: List[str], body: Any) -> httpx.Response:
        if not rest:
            if method == "GET":
                return httpx.Response(200, json=list(self.roles.values()))
            if method == "POST":
                return httpx.Response(201, json=self.add_role(body))
        role_id = int(rest[0])
        if role_id not in self.roles:
            return httpx.Response(404, json={"error": "Role not found"})
        if len(rest) == 2 and rest[1] == "collaborators" and method == "GET":
            members = [
                record for record in self.collaborators.values()
                if role_id in record.get("roleIds", [])
            ]
            return httpx.Response(200, json=members)
        if method == "PUT":
            self.roles[role_id] = {**self.roles[role_id], **body}
            return httpx.Response(200, json=self.roles[role_id])
        if method == "DELETE":
            del self.roles[role_id]
            return httpx.Response(204)
        return httpx.Response(405)


@pytest.fixture
def fake_api() -> FakeCollaboratorApi:
    return FakeCollaboratorApi()


@pytest.fixture
def collaborator_service(fake_api: FakeCollaboratorApi) -> CollaboratorService:
    return CollaboratorService(
        base_url=BASE_URL,
        token=API_TOKEN,
        transport=httpx.MockTransport(fake_api.handler),
    )


@pytest.fixture
def role_service(fake_api: FakeCollaboratorApi) -> RoleService:
    return RoleService(
        base_url=BASE_URL,
        token=API_TOKEN,
        transport=httpx.MockTransport(fake_api.handler),
    )


@pytest.fixture
def valid_form() -> Dict[str, Any]:
    """A collaborator form that passes validation."""
    form = new_collaborator_form_defaults()
    form.update(
        fullName="Mario Rossi",
        email="mario.rossi@fieldcrew.io",
        phone="+393331234567",
        role="worker",
    )
    return form
