import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from app.core.deps import CATALOG_MANAGERS, AuthenticatedPrincipal, require_role
from app.repositories.registry import get_store
from app.repositories.store import Record, Repository, ResourceStore
from app.services.envelope import format_page
from app.services.list_params import ListConfig, build_query_spec
from app.services.list_query import execute

_LOG = logging.getLogger("app.resources")

PrepareHook = Callable[[dict[str, Any], AuthenticatedPrincipal], dict[str, Any]]
UpdateHook = Callable[[dict[str, Any], Record, AuthenticatedPrincipal], dict[str, Any]]
# Called with the stored row before an "update" or "delete"; raises HTTPException to refuse.
AuthorizeHook = Callable[[Record, AuthenticatedPrincipal, str], None]


@dataclass(frozen=True)
class ResourceDefinition:
    name: str
    label: str
    list_config: ListConfig
    create_model: Optional[type[BaseModel]] = None
    update_model: Optional[type[BaseModel]] = None
    lookup_field: str = "id"
    slug_source: Optional[str] = None
    unique_field: Optional[str] = None
    write_roles: tuple[str, ...] = CATALOG_MANAGERS
    read_roles: Optional[tuple[str, ...]] = None
    create_defaults: Optional[dict[str, Any]] = None
    prepare_create: Optional[PrepareHook] = None
    prepare_update: Optional[UpdateHook] = None
    authorize: Optional[AuthorizeHook] = None
    present: Optional[Callable[[Record], Record]] = None
    deletable: bool = True


def slugify(value: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", str(value or "").lower()).strip("-")


def parse_record_id(raw: str, label: str) -> int:
    try:
        return int(str(raw).strip())
    except ValueError:
        raise HTTPException(status_code=404, detail=f"{label} not found")


def repository_for(name: str) -> Callable[..., Repository]:
    def _dependency(store: ResourceStore = Depends(get_store)) -> Repository:
        return store.repository(name)
    return _dependency


def list_records(request: Request, records: list[Record], config: ListConfig) -> dict[str, Any]:
    spec = build_query_spec(request.query_params, config)
    page = execute(records, spec)
    return format_page(page, request.url.path, config.envelope)


def _find_record(repo: Repository, definition: ResourceDefinition, key: str) -> Record:
    if definition.lookup_field == "id":
        row = repo.get(parse_record_id(key, definition.label))
    else:
        row = repo.find_by(definition.lookup_field, key)
    if row is None:
        raise HTTPException(status_code=404, detail=f"{definition.label} not found")
    return row


def _ensure_unique(repo: Repository, definition: ResourceDefinition, field: str, value: Any, *, exclude_id: int | None = None) -> None:
    existing = repo.find_by(field, value)
    if existing is not None and existing.get("id") != exclude_id:
        raise HTTPException(status_code=400, detail=f"{definition.label} with this {field} already exists")


def _with_slug(repo: Repository, definition: ResourceDefinition, data: dict[str, Any], *, current: Record | None = None) -> dict[str, Any]:
    source = data.get(definition.slug_source or "")
    if not source:
        return data
    if current is not None and source == current.get(definition.slug_source):
        return data
    slug = slugify(source)
    _ensure_unique(repo, definition, "slug", slug, exclude_id=current.get("id") if current else None)
    data["slug"] = slug
    return data


def _present(definition: ResourceDefinition, row: Record) -> Record:
    return definition.present(row) if definition.present is not None else row


def build_resource_router(definition: ResourceDefinition) -> APIRouter:
    router = APIRouter()
    get_repo = repository_for(definition.name)
    writer = require_role(*definition.write_roles)
    read_guard = [Depends(require_role(*definition.read_roles))] if definition.read_roles else []

    @router.get("", dependencies=read_guard)
    def list_resource(request: Request, repo: Repository = Depends(get_repo)):
        rows = [_present(definition, row) for row in repo.all()]
        return list_records(request, rows, definition.list_config)

    @router.get("/{key}", dependencies=read_guard)
    def get_resource(key: str, repo: Repository = Depends(get_repo)):
        return _present(definition, _find_record(repo, definition, key))

    if definition.create_model is not None:
        create_model = definition.create_model

        @router.post("", status_code=201)
        def create_resource(
            payload: create_model,
            repo: Repository = Depends(get_repo),
            principal: AuthenticatedPrincipal = Depends(writer),
        ):
            data = {**(definition.create_defaults or {}), **payload.model_dump()}
            if definition.prepare_create is not None:
                data = definition.prepare_create(data, principal)
            if definition.slug_source:
                data = _with_slug(repo, definition, data)
            if definition.unique_field:
                _ensure_unique(repo, definition, definition.unique_field, data.get(definition.unique_field))
            row = repo.create(data)
            _LOG.info("created resource=%s id=%s by=%s", definition.name, row["id"], principal.id)
            return {
                "success": True,
                "message": f"{definition.label} created successfully",
                "data": _present(definition, row),
            }

    if definition.update_model is not None:
        update_model = definition.update_model

        @router.put("/{key}")
        def update_resource(
            key: str,
            payload: update_model,
            repo: Repository = Depends(get_repo),
            principal: AuthenticatedPrincipal = Depends(writer),
        ):
            current = _find_record(repo, definition, key)
            if definition.authorize is not None:
                definition.authorize(current, principal, "update")
            changes = payload.model_dump(exclude_unset=True, exclude_none=True)
            if definition.prepare_update is not None:
                changes = definition.prepare_update(changes, current, principal)
            if definition.slug_source:
                changes = _with_slug(repo, definition, changes, current=current)
            field = definition.unique_field
            if field and field in changes and changes[field] != current.get(field):
                _ensure_unique(repo, definition, field, changes[field], exclude_id=current["id"])
            row = repo.update(current["id"], changes)
            if row is None:
                raise HTTPException(status_code=404, detail=f"{definition.label} not found")
            return {
                "success": True,
                "message": f"{definition.label} updated successfully",
                "data": _present(definition, row),
            }

    if not definition.deletable:
        return router

    @router.delete("/{record_id}")
    def delete_resource(
        record_id: str,
        repo: Repository = Depends(get_repo),
        principal: AuthenticatedPrincipal = Depends(writer),
    ):
        target_id = parse_record_id(record_id, definition.label)
        current = repo.get(target_id)
        if current is None:
            raise HTTPException(status_code=404, detail=f"{definition.label} not found")
        if definition.authorize is not None:
            definition.authorize(current, principal, "delete")
        row = repo.delete(target_id)
        if row is None:
            raise HTTPException(status_code=404, detail=f"{definition.label} not found")
        _LOG.info("deleted resource=%s id=%s by=%s", definition.name, row["id"], principal.id)
        return {
            "success": True,
            "message": f"{definition.label} deleted successfully",
            "data": _present(definition, row),
        }

    return router
