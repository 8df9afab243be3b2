from __future__ import annotations

import logging

import pytest

from src.personnel_panel.personnel_panel.common.error_formatter import (
    BackendFault,
    PlainFault,
    UnknownFault,
    classify,
    describe_backend_error,
    format_error_for_user,
    log_error,
    safe_call,
)
from src.personnel_panel.personnel_panel.core.exceptions import BackendError, NotFoundError, ValidationError


@pytest.mark.parametrize(
    "code, expected",
    [
        ("PGRST116", "Kayıt bulunamadı"),
        ("23505", "Bu kayıt zaten mevcut"),
        ("23503", "İlişkili bir kayıt bulunamadı"),
        ("42501", "Bu işlem için yetkiniz yok"),
    ],
)
def test_known_codes_map_to_localized_messages(code, expected):
    assert describe_backend_error(BackendError("raw driver text", code=code)) == expected
    assert describe_backend_error({"code": code, "message": "raw"}) == expected


def test_unknown_code_keeps_message():
    assert describe_backend_error(BackendError("connection reset", code="08006")) == "connection reset"


def test_missing_error_falls_back_to_unknown_message():
    assert describe_backend_error(None) == "Bilinmeyen bir hata oluştu"


@pytest.mark.parametrize("error", [{}, {"foo": 1}, Exception(""), RuntimeError(), 42])
def test_error_without_message_asks_to_retry(error):
    assert describe_backend_error(error) == "Bir hata oluştu. Lütfen tekrar deneyin."


def test_unknown_code_without_message_asks_to_retry():
    assert describe_backend_error(BackendError("", code="08006")) == "Bir hata oluştu. Lütfen tekrar deneyin."


def test_plain_string_is_returned_as_is():
    assert describe_backend_error("Sunucuya ulaşılamadı") == "Sunucuya ulaşılamadı"


def test_classify_variants():
    assert classify(None) == UnknownFault()
    assert classify("x") == PlainFault("x")
    assert classify(BackendError("m", code="23505")) == BackendFault(code="23505", message="m")
    assert classify(RuntimeError()) == BackendFault(code=None, message=None)


def test_format_error_for_user():
    assert format_error_for_user(ValidationError("Lütfen şablon adı girin")) == "Lütfen şablon adı girin"
    assert format_error_for_user(BackendError("dup", code="23505")) == "Bu kayıt zaten mevcut"
    assert format_error_for_user(RuntimeError("boom")) == "boom"
    assert format_error_for_user("hazır mesaj") == "hazır mesaj"
    assert format_error_for_user(None) == "Beklenmeyen bir hata oluştu"


def test_not_found_error_uses_its_own_message():
    assert format_error_for_user(NotFoundError("Personel bulunamadı")) == "Personel bulunamadı"


def test_log_error_attaches_context(caplog):
    with caplog.at_level(logging.ERROR, logger="personnel_panel"):
        log_error(BackendError("dup", code="23505"), "EmployeesPage")

    record = caplog.records[-1]
    assert "[EmployeesPage]" in record.getMessage()
    assert record.extra_fields["code"] == "23505"


def test_safe_call_wraps_success_and_failure():
    ok = safe_call(lambda: 5)
    assert ok.ok and ok.data == 5

    def fail():
        raise BackendError("dup", code="23505")

    failed = safe_call(fail)
    assert not failed.ok
    assert failed.data is None
    assert failed.error == "Bu kayıt zaten mevcut"

    assert safe_call(fail, "Kaydedilemedi").error == "Kaydedilemedi"
