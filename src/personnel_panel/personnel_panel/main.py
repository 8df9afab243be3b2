from __future__ import annotations

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, redirect, render_template, url_for
from werkzeug.exceptions import HTTPException

from config import get_settings_module, load_settings

from .common.error_formatter import format_error_for_user, log_error
from .core.constants import DEFAULT_BANNER_TIMEOUT_MS
from .core.logger import logger, setup_logger
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_employees, list_tables

from .container import Container, build_container
from .employees.controller import register as register_employees
from .exports.controller import register as register_exports

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = load_settings()
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["BANNER_TIMEOUT_MS"] = int(getattr(settings, "BANNER_TIMEOUT_MS", DEFAULT_BANNER_TIMEOUT_MS))

    setup_logger(
        level=getattr(settings, "LOG_LEVEL", None),
        fmt=getattr(settings, "LOG_FORMAT", None),
    )
    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            ensure_demo_employees(db_config)
            logger.info("Demo seed ready")

        container = build_container(
            db_config=db_config,
            template_store_path=getattr(settings, "TEMPLATE_STORE_PATH"),
            logo_path=getattr(settings, "EXPORT_LOGO_PATH", None),
        )

    @app.context_processor
    def inject_banner_timeout():
        return {"banner_timeout_ms": app.config["BANNER_TIMEOUT_MS"]}

    @app.route("/", endpoint="home")
    def home():
        return redirect(url_for("employees"))

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        if isinstance(e, HTTPException):
            return e
        log_error(e, "ErrorBoundary")
        message = format_error_for_user(e)
        return render_template("error.html", message=message, debug=app.config["DEBUG"], error=e), 500

    register_employees(app, container)
    register_exports(app, container)

    return app
