from __future__ import annotations

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.error_formatter import UNEXPECTED_ERROR_MESSAGE, format_error_for_user, log_error
from ..common.flask_host import FlaskHostActions
from ..core.enums import ColorScheme, ExportColumn, MessageKind
from ..core.exceptions import DomainError
from ..container import Container
from .forms import COLUMN_FIELD_PREFIX, options_from_form
from .options import COLUMN_LABELS, ExportOptions


def register(app: Flask, container: Container) -> None:
    panel = container.export_panel

    def _flash_unexpected(e: Exception, context: str) -> None:
        log_error(e, context)
        if bool(app.config.get("DEBUG", False)):
            flash(f"{UNEXPECTED_ERROR_MESSAGE}: {e}", MessageKind.ERROR.value)
        else:
            flash(UNEXPECTED_ERROR_MESSAGE, MessageKind.ERROR.value)

    def _render(options: ExportOptions, status: int = 200):
        employees, templates = [], []
        try:
            employees = panel.list_employees()
            templates = panel.list_templates()
        except DomainError as e:
            flash(format_error_for_user(e), MessageKind.ERROR.value)
        except Exception as e:
            _flash_unexpected(e, "ExcelExportPanel")
        return (
            render_template(
                "export.html",
                options=options,
                employees=employees,
                templates=templates,
                columns=list(ExportColumn),
                column_labels=COLUMN_LABELS,
                column_prefix=COLUMN_FIELD_PREFIX,
                color_schemes=list(ColorScheme),
                active_page="export",
            ),
            status,
        )

    @app.route("/export", methods=["GET"], endpoint="export_panel")
    def export_panel():
        options = panel.default_options()
        template_id = request.args.get("template")
        if template_id:
            options = panel.apply_template(template_id, options)
        return _render(options)

    @app.route("/export", methods=["POST"], endpoint="run_export")
    def run_export():
        options = panel.default_options()
        try:
            options = options_from_form(request.form, fallback=options)
            return panel.run_export(options, host=FlaskHostActions())
        except DomainError as e:
            flash(format_error_for_user(e), MessageKind.ERROR.value)
        except Exception as e:
            _flash_unexpected(e, "ExcelExportPanel.export")
        return _render(options, 400)

    @app.route("/export/templates", methods=["POST"], endpoint="save_export_template")
    def save_export_template():
        options = panel.default_options()
        try:
            options = options_from_form(request.form, fallback=options)
            template = panel.save_template(
                request.form.get("template_name", ""), options, host=FlaskHostActions()
            )
            return redirect(url_for("export_panel", template=template.template_id))
        except DomainError as e:
            flash(format_error_for_user(e), MessageKind.ERROR.value)
        except Exception as e:
            _flash_unexpected(e, "ExcelExportPanel.saveTemplate")
        return _render(options, 400)

    @app.route(
        "/export/templates/<template_id>/delete",
        methods=["POST"],
        endpoint="delete_export_template",
    )
    def delete_export_template(template_id: str):
        host = FlaskHostActions(fallback_url=url_for("export_panel"))
        try:
            panel.delete_template(template_id, host=host)
        except DomainError as e:
            flash(format_error_for_user(e), MessageKind.ERROR.value)
        except Exception as e:
            _flash_unexpected(e, "ExcelExportPanel.deleteTemplate")
        return host.reload()

    @app.route("/api/export/templates", methods=["GET"], endpoint="api_export_templates")
    def api_export_templates():
        return jsonify([t.to_record() for t in panel.list_templates()])
