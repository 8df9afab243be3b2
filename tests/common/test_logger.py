import importlib
import json
import logging

import pytest

from config import development, get_settings_module, production, testing
from src.personnel_panel.personnel_panel.core.logger import JsonFormatter, setup_logger


def test_json_formatter_merges_extra_fields():
    record = logging.LogRecord("personnel_panel", logging.ERROR, __file__, 10, "failed %s", ("export",), None)
    record.extra_fields = {"context": "ExcelExportPanel", "code": "23505"}

    data = json.loads(JsonFormatter().format(record))

    assert data["message"] == "failed export"
    assert data["level"] == "ERROR"
    assert data["context"] == "ExcelExportPanel"
    assert data["code"] == "23505"


def test_setup_logger_is_idempotent():
    log = setup_logger("personnel_panel.test", level="debug", fmt="json")
    again = setup_logger("personnel_panel.test", level="warning", fmt="text")

    assert log is again
    assert len(again.handlers) == 1
    assert again.level == logging.WARNING
    assert not isinstance(again.handlers[0].formatter, JsonFormatter)


def test_settings_module_follows_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "prod")
    assert get_settings_module() == "config.production"
    monkeypatch.setenv("APP_ENV", "Testing")
    assert get_settings_module() == "config.testing"
    monkeypatch.setenv("APP_ENV", "staging")
    assert get_settings_module() == "config.development"


@pytest.mark.parametrize("module", [development, testing, production])
def test_logo_path_is_unset_without_env(monkeypatch, module):
    monkeypatch.delenv("EXPORT_LOGO_PATH", raising=False)
    try:
        assert importlib.reload(module).EXPORT_LOGO_PATH is None
        monkeypatch.setenv("EXPORT_LOGO_PATH", "/srv/brand/logo.png")
        assert importlib.reload(module).EXPORT_LOGO_PATH == "/srv/brand/logo.png"
    finally:
        monkeypatch.undo()
        importlib.reload(module)
