from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeeService
from .exports.engine import ExcelExportEngine
from .exports.panel import ExportPanel
from .exports.template_store import LocalTemplateRepository
from .performance.mysql_deposit_repository import MySQLDepositRepository
from .performance.service import PerformanceReportService
from .storage.local_store import JsonFileStore


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    deposits_repo: MySQLDepositRepository
    templates_repo: LocalTemplateRepository

    employee_service: EmployeeService
    performance_service: PerformanceReportService
    export_engine: ExcelExportEngine
    export_panel: ExportPanel


def build_container(
    *,
    db_config: dict,
    template_store_path: str | Path,
    logo_path: Optional[str | Path] = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    deposits_repo = MySQLDepositRepository(conn)
    templates_repo = LocalTemplateRepository(JsonFileStore(template_store_path))

    employee_service = EmployeeService(employees_repo)
    performance_service = PerformanceReportService(deposits_repo, employees_repo)
    export_engine = ExcelExportEngine(logo_path=logo_path)
    export_panel = ExportPanel(templates_repo, export_engine, performance_service, employees_repo)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        deposits_repo=deposits_repo,
        templates_repo=templates_repo,
        employee_service=employee_service,
        performance_service=performance_service,
        export_engine=export_engine,
        export_panel=export_panel,
    )
