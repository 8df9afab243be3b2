from __future__ import annotations

import json
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional, Protocol, Sequence

from ..common.datetime_utils import now_utc
from ..common.validators import require_non_empty
from ..core.constants import TEMPLATE_INDEX_KEY, TEMPLATE_RECORD_PREFIX
from ..core.exceptions import ValidationError
from ..core.logger import logger
from ..storage.local_store import LocalStore
from .options import ExportOptions


@dataclass(frozen=True)
class ExcelTemplate:
    """A named, saved snapshot of export options."""

    template_id: str
    name: str
    options: ExportOptions
    created_at: datetime

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.template_id,
            "name": self.name,
            "options": self.options.to_dict(),
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "ExcelTemplate":
        try:
            return cls(
                template_id=str(record["id"]),
                name=str(record["name"]),
                options=ExportOptions.from_dict(record.get("options") or {}),
                created_at=datetime.fromisoformat(str(record["createdAt"])),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError(f"Geçersiz şablon kaydı: {e}")


class TemplateRepository(Protocol):
    def list_all(self) -> Sequence[ExcelTemplate]:
        """Saved templates, oldest first."""
        raise NotImplementedError

    def save(self, name: str, options: ExportOptions) -> ExcelTemplate:
        raise NotImplementedError

    def load(self, template_id: str) -> Optional[ExcelTemplate]:
        raise NotImplementedError

    def delete(self, template_id: str) -> None:
        raise NotImplementedError


def _record_key(template_id: str) -> str:
    return f"{TEMPLATE_RECORD_PREFIX}{template_id}"


class LocalTemplateRepository(TemplateRepository):
    """Templates kept in a LocalStore.

    Layout: `excelTemplates` holds the JSON list of ids in save order and each
    template lives under `excelTemplate:<id>`.
    """

    def __init__(
        self,
        store: LocalStore,
        *,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self._store = store
        self._clock = clock or now_utc
        self._id_factory = id_factory or (lambda: uuid.uuid4().hex)

    def _index(self) -> list[str]:
        raw = self._store.get_item(TEMPLATE_INDEX_KEY)
        if not raw:
            return []
        try:
            ids = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Template index is not valid JSON; ignoring it")
            return []
        if not isinstance(ids, list):
            logger.warning("Template index is not a list; ignoring it")
            return []
        return [str(i) for i in ids]

    def _write_index(self, ids: list[str]) -> None:
        self._store.set_item(TEMPLATE_INDEX_KEY, json.dumps(ids))

    def _read(self, template_id: str) -> Optional[ExcelTemplate]:
        raw = self._store.get_item(_record_key(template_id))
        if raw is None:
            return None
        try:
            return ExcelTemplate.from_record(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning("Skipping unreadable template %s: %s", template_id, e)
            return None

    def list_all(self) -> Sequence[ExcelTemplate]:
        templates = []
        for template_id in self._index():
            template = self._read(template_id)
            if template is None:
                logger.warning("Template %s is listed but missing", template_id)
                continue
            templates.append(template)
        # sorted() is stable, so equal timestamps keep save order.
        return sorted(templates, key=lambda t: t.created_at)

    def save(self, name: str, options: ExportOptions) -> ExcelTemplate:
        name = require_non_empty(name, "şablon adı")
        template = ExcelTemplate(
            template_id=self._id_factory(),
            name=name,
            options=options,
            created_at=self._clock(),
        )
        self._store.set_item(
            _record_key(template.template_id),
            json.dumps(template.to_record(), ensure_ascii=False),
        )
        ids = self._index()
        ids.append(template.template_id)
        self._write_index(ids)
        logger.info("Template %s saved as %r", template.template_id, name)
        return template

    def load(self, template_id: str) -> Optional[ExcelTemplate]:
        return self._read(template_id)

    def delete(self, template_id: str) -> None:
        ids = self._index()
        if template_id in ids:
            self._write_index([i for i in ids if i != template_id])
        self._store.remove_item(_record_key(template_id))
