from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.error_formatter import UNEXPECTED_ERROR_MESSAGE, format_error_for_user, log_error
from ..common.flask_host import FlaskHostActions
from ..core.enums import MessageKind
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _flash_unexpected(e: Exception, context: str) -> None:
        log_error(e, context)
        if bool(app.config.get("DEBUG", False)):
            flash(f"{UNEXPECTED_ERROR_MESSAGE}: {e}", MessageKind.ERROR.value)
        else:
            flash(UNEXPECTED_ERROR_MESSAGE, MessageKind.ERROR.value)

    @app.route("/employees", methods=["GET"], endpoint="employees")
    def employees():
        rows = []
        try:
            rows = container.employee_service.list_employees()
        except DomainError as e:
            flash(format_error_for_user(e), MessageKind.ERROR.value)
        except Exception as e:
            _flash_unexpected(e, "EmployeesPage")
        return render_template("employees.html", employees=rows, active_page="employees")

    @app.route("/employees/add", methods=["POST"], endpoint="add_employee")
    def add_employee():
        try:
            employee = container.employee_service.add_employee(request.form.get("name", ""))
            flash(f"{employee.name} eklendi", MessageKind.SUCCESS.value)
        except DomainError as e:
            flash(format_error_for_user(e), MessageKind.ERROR.value)
        except Exception as e:
            _flash_unexpected(e, "EmployeesPage.add")
        return redirect(url_for("employees"))

    @app.route("/employees/delete/<employee_id>", methods=["POST"], endpoint="delete_employee")
    def delete_employee(employee_id: str):
        host = FlaskHostActions(fallback_url=url_for("employees"))
        try:
            if container.employee_service.delete_employee(employee_id, host=host):
                flash("Personel silindi", MessageKind.SUCCESS.value)
        except DomainError as e:
            flash(format_error_for_user(e), MessageKind.ERROR.value)
        except Exception as e:
            _flash_unexpected(e, "EmployeesPage.delete")
        return host.reload()
