from __future__ import annotations

import copy
import logging
from threading import Lock
from typing import Any, Callable, Iterable, Mapping, Protocol

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.common import utcnow_iso
from app.models.resource_document import ResourceDocument

_LOG = logging.getLogger("app.store")

Record = dict[str, Any]
# Computes extra fields from the id a create assigns; runs while the id is reserved.
DeriveFields = Callable[[int], Mapping[str, Any]]


class RepositoryUnavailable(RuntimeError):
    pass


class Repository(Protocol):
    name: str

    def all(self) -> list[Record]:
        ...

    def get(self, record_id: int) -> Record | None:
        ...

    def find_by(self, field: str, value: Any) -> Record | None:
        ...

    def create(self, payload: Mapping[str, Any], derive: DeriveFields | None = None) -> Record:
        ...

    def update(self, record_id: int, changes: Mapping[str, Any]) -> Record | None:
        ...

    def delete(self, record_id: int) -> Record | None:
        ...


def _stamp_new(record_id: int, payload: Mapping[str, Any], derive: DeriveFields | None = None) -> Record:
    now = utcnow_iso()
    row = copy.deepcopy(dict(payload))
    if derive is not None:
        row.update(derive(record_id))
    row["id"] = record_id
    row.setdefault("created_at", now)
    row["updated_at"] = now
    return row


def _payload_equals(field: str, value: Any):
    """JSON path comparison for string and integer lookups; ``None`` when SQL cannot express it."""
    element = ResourceDocument.payload[field]
    if isinstance(value, str):
        return element.as_string() == value
    if isinstance(value, int) and not isinstance(value, bool):
        return element.as_integer() == value
    return None


def _apply_changes(current: Record, changes: Mapping[str, Any]) -> Record:
    row = copy.deepcopy(current)
    row.update(copy.deepcopy(dict(changes)))
    row["id"] = current["id"]
    row["updated_at"] = utcnow_iso()
    return row


class InMemoryRepository:
    def __init__(self, name: str, seed: Iterable[Mapping[str, Any]] = ()):
        self.name = name
        self._rows: list[Record] = [copy.deepcopy(dict(row)) for row in seed]
        self._lock = Lock()

    def all(self) -> list[Record]:
        with self._lock:
            return copy.deepcopy(self._rows)

    def get(self, record_id: int) -> Record | None:
        return self.find_by("id", record_id)

    def find_by(self, field: str, value: Any) -> Record | None:
        with self._lock:
            for row in self._rows:
                if row.get(field) == value:
                    return copy.deepcopy(row)
        return None

    def create(self, payload: Mapping[str, Any], derive: DeriveFields | None = None) -> Record:
        with self._lock:
            next_id = max((int(row.get("id") or 0) for row in self._rows), default=0) + 1
            row = _stamp_new(next_id, payload, derive)
            self._rows.append(row)
            return copy.deepcopy(row)

    def update(self, record_id: int, changes: Mapping[str, Any]) -> Record | None:
        with self._lock:
            for index, row in enumerate(self._rows):
                if row.get("id") == record_id:
                    self._rows[index] = _apply_changes(row, changes)
                    return copy.deepcopy(self._rows[index])
        return None

    def delete(self, record_id: int) -> Record | None:
        with self._lock:
            for index, row in enumerate(self._rows):
                if row.get("id") == record_id:
                    return self._rows.pop(index)
        return None


class SqlRepository:
    """Stores each record as a JSON document in ``resource_documents``.

    Sample records are written on first access when the resource has no rows.
    Every call runs in its own session, so instances are safe to share.
    """

    def __init__(
        self,
        name: str,
        session_factory: Callable[[], Session],
        seed: Iterable[Mapping[str, Any]] = (),
    ):
        self.name = name
        self._session_factory = session_factory
        self._seed = [copy.deepcopy(dict(row)) for row in seed]
        self._seeded = False
        self._seed_lock = Lock()
        self._write_lock = Lock()

    def _session(self) -> Session:
        try:
            db = self._session_factory()
        except SQLAlchemyError as exc:
            raise RepositoryUnavailable(str(exc)) from exc
        self._ensure_seeded(db)
        return db

    def _ensure_seeded(self, db: Session) -> None:
        if self._seeded:
            return
        with self._seed_lock:
            if self._seeded:
                return
            try:
                count = db.scalar(
                    select(func.count()).select_from(ResourceDocument).where(ResourceDocument.resource == self.name)
                )
                if not count and self._seed:
                    for row in self._seed:
                        db.add(ResourceDocument(resource=self.name, record_id=int(row["id"]), payload=row))
                    db.commit()
                    _LOG.info("seeded resource=%s rows=%s", self.name, len(self._seed))
            except SQLAlchemyError as exc:
                db.rollback()
                db.close()
                raise RepositoryUnavailable(str(exc)) from exc
            self._seeded = True

    def _row(self, db: Session, record_id: int) -> ResourceDocument | None:
        return db.scalar(
            select(ResourceDocument).where(
                ResourceDocument.resource == self.name,
                ResourceDocument.record_id == record_id,
            )
        )

    def all(self) -> list[Record]:
        try:
            with self._session() as db:
                rows = db.scalars(
                    select(ResourceDocument)
                    .where(ResourceDocument.resource == self.name)
                    .order_by(ResourceDocument.record_id.asc())
                ).all()
                return [copy.deepcopy(row.payload) for row in rows]
        except SQLAlchemyError as exc:
            raise RepositoryUnavailable(str(exc)) from exc

    def get(self, record_id: int) -> Record | None:
        try:
            with self._session() as db:
                row = self._row(db, record_id)
                return copy.deepcopy(row.payload) if row is not None else None
        except SQLAlchemyError as exc:
            raise RepositoryUnavailable(str(exc)) from exc

    def find_by(self, field: str, value: Any) -> Record | None:
        if field == "id":
            return self.get(value)
        condition = _payload_equals(field, value)
        if condition is None:
            return next((row for row in self.all() if row.get(field) == value), None)
        try:
            with self._session() as db:
                rows = db.scalars(
                    select(ResourceDocument)
                    .where(ResourceDocument.resource == self.name, condition)
                    .order_by(ResourceDocument.record_id.asc())
                ).all()
                for row in rows:
                    if row.payload.get(field) == value:
                        return copy.deepcopy(row.payload)
                return None
        except SQLAlchemyError as exc:
            raise RepositoryUnavailable(str(exc)) from exc

    def create(self, payload: Mapping[str, Any], derive: DeriveFields | None = None) -> Record:
        try:
            with self._write_lock, self._session() as db:
                current_max = db.scalar(
                    select(func.max(ResourceDocument.record_id)).where(ResourceDocument.resource == self.name)
                )
                row = _stamp_new(int(current_max or 0) + 1, payload, derive)
                db.add(ResourceDocument(resource=self.name, record_id=row["id"], payload=row))
                db.commit()
                return copy.deepcopy(row)
        except SQLAlchemyError as exc:
            raise RepositoryUnavailable(str(exc)) from exc

    def update(self, record_id: int, changes: Mapping[str, Any]) -> Record | None:
        try:
            with self._session() as db:
                doc = self._row(db, record_id)
                if doc is None:
                    return None
                updated = _apply_changes(doc.payload, changes)
                doc.payload = updated
                db.add(doc)
                db.commit()
                return copy.deepcopy(updated)
        except SQLAlchemyError as exc:
            raise RepositoryUnavailable(str(exc)) from exc

    def delete(self, record_id: int) -> Record | None:
        try:
            with self._session() as db:
                doc = self._row(db, record_id)
                if doc is None:
                    return None
                payload = copy.deepcopy(doc.payload)
                db.delete(doc)
                db.commit()
                return payload
        except SQLAlchemyError as exc:
            raise RepositoryUnavailable(str(exc)) from exc


class ResourceStore:
    def __init__(self, repositories: Iterable[Repository]):
        self._repositories = {repo.name: repo for repo in repositories}

    def repository(self, name: str) -> Repository:
        try:
            return self._repositories[name]
        except KeyError:
            raise KeyError(f"Unknown resource: {name}") from None

    @property
    def names(self) -> list[str]:
        return sorted(self._repositories)
