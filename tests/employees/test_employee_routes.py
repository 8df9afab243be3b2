from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

import pytest

from src.personnel_panel.personnel_panel.core.exceptions import BackendError
from src.personnel_panel.personnel_panel.employees.model import Employee
from src.personnel_panel.personnel_panel.employees.service import EmployeeService
from src.personnel_panel.personnel_panel.main import create_app


class FakeEmployeeRepo:
    def __init__(self):
        self.rows: dict[str, Employee] = {}
        self.fail_with = None

    def list_all(self):
        if self.fail_with:
            raise self.fail_with
        return list(self.rows.values())

    def get_by_id(self, employee_id):
        return self.rows.get(employee_id)

    def create(self, *, name, color):
        eid = f"e{len(self.rows) + 1}"
        self.rows[eid] = Employee(eid, name, color, datetime(2024, 1, 1))
        return self.rows[eid]

    def delete_by_id(self, employee_id):
        return self.rows.pop(employee_id, None) is not None


class UnusedPanel:
    pass


@dataclass
class FakeContainer:
    employee_service: EmployeeService
    export_panel: object


@pytest.fixture
def repo():
    return FakeEmployeeRepo()


@pytest.fixture
def client(monkeypatch, repo):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(FakeContainer(employee_service=EmployeeService(repo), export_panel=UnusedPanel()))
    return app.test_client()


def test_add_and_list(client, repo):
    resp = client.post("/employees/add", data={"name": "Zeynep"}, follow_redirects=True)
    body = resp.get_data(as_text=True)

    assert resp.status_code == 200
    assert "Zeynep" in body
    assert len(repo.rows) == 1


def test_blank_name_flashes_validation_message(client, repo):
    body = client.post("/employees/add", data={"name": " "}, follow_redirects=True).get_data(as_text=True)

    assert "Lütfen personel adı girin" in body
    assert repo.rows == {}


def test_delete_requires_confirm_field(client, repo):
    client.post("/employees/add", data={"name": "Ali"})

    client.post("/employees/delete/e1", data={})
    assert "e1" in repo.rows

    client.post("/employees/delete/e1", data={"confirm": "1"})
    assert repo.rows == {}


def test_delete_unknown_flashes_not_found(client):
    body = client.post("/employees/delete/zzz", data={"confirm": "1"}, follow_redirects=True).get_data(as_text=True)
    assert "Personel bulunamadı" in body


def test_backend_errors_are_localized(client, repo):
    repo.fail_with = BackendError("permission denied for table", code="42501")

    body = client.get("/employees").get_data(as_text=True)

    assert "Bu işlem için yetkiniz yok" in body


def test_delete_reloads_the_posting_page(client):
    client.post("/employees/add", data={"name": "Ali"})

    resp = client.post(
        "/employees/delete/e1",
        data={"confirm": "1"},
        headers={"Referer": "http://localhost/employees?sort=name"},
    )

    assert resp.status_code == 302
    assert resp.headers["Location"] == "http://localhost/employees?sort=name"


@pytest.mark.parametrize("referer", [None, "https://elsewhere.example/attack"])
def test_delete_without_local_referrer_returns_to_list(client, referer):
    headers = {"Referer": referer} if referer else {}

    resp = client.post("/employees/delete/zzz", data={"confirm": "1"}, headers=headers)

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/employees")
