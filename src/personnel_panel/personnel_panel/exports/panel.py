from __future__ import annotations

from datetime import date
from typing import Any, Optional, Sequence

from ..core.enums import MessageKind
from ..core.host import HostActions
from ..core.logger import logger
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..performance.service import PerformanceReportService
from .engine import ExcelExportEngine
from .options import ExportOptions
from .template_store import ExcelTemplate, TemplateRepository

EXPORT_SUCCESS_MESSAGE = "Excel dosyası başarıyla indirildi!"
TEMPLATE_SAVED_MESSAGE = "Şablon kaydedildi!"
TEMPLATE_DELETED_MESSAGE = "Şablon silindi"
TEMPLATE_DELETE_CONFIRM = "Bu şablonu silmek istediğinize emin misiniz?"


class ExportPanel:
    """Use case: configure, run and remember spreadsheet exports."""

    def __init__(
        self,
        templates: TemplateRepository,
        engine: ExcelExportEngine,
        performance: PerformanceReportService,
        employees: EmployeeRepository,
    ):
        self._templates = templates
        self._engine = engine
        self._performance = performance
        self._employees = employees

    def default_options(self, today: Optional[date] = None) -> ExportOptions:
        return ExportOptions.defaults(today)

    def list_employees(self) -> Sequence[Employee]:
        return list(self._employees.list_all())

    def list_templates(self) -> Sequence[ExcelTemplate]:
        return list(self._templates.list_all())

    def run_export(self, options: ExportOptions, *, host: HostActions) -> Any:
        """Build the dataset, render it and hand the file to the host.

        Returns whatever `host.download` returns (a Flask response in the app).
        """
        options.validate()
        employee_ids = None if options.include_all_employees else sorted(options.selected_employees)
        dataset = self._performance.build_dataset(
            start=options.start_date,
            end=options.end_date,
            employee_ids=employee_ids,
        )
        artifact = self._engine.export(options, dataset)
        host.notify(MessageKind.SUCCESS, EXPORT_SUCCESS_MESSAGE)
        return host.download(artifact)

    def save_template(self, name: str, options: ExportOptions, *, host: HostActions) -> ExcelTemplate:
        template = self._templates.save(name, options)
        host.notify(MessageKind.SUCCESS, TEMPLATE_SAVED_MESSAGE)
        return template

    def apply_template(self, template_id: str, current: ExportOptions) -> ExportOptions:
        template = self._templates.load(template_id)
        if template is None:
            logger.warning("Template %s not found; keeping current options", template_id)
            return current
        return template.options

    def delete_template(self, template_id: str, *, host: HostActions) -> bool:
        if not host.confirm(TEMPLATE_DELETE_CONFIRM):
            return False
        self._templates.delete(template_id)
        host.notify(MessageKind.INFO, TEMPLATE_DELETED_MESSAGE)
        return True
