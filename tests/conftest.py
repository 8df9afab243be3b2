from __future__ import annotations

from datetime import date

import pytest

from src.personnel_panel.personnel_panel.performance.model import PerformanceRow


class FakeHost:
    def __init__(self, *, confirm: bool = True):
        self.answer = confirm
        self.confirmations: list[str] = []
        self.messages: list[tuple] = []
        self.downloads: list = []
        self.reloads = 0

    def confirm(self, message):
        self.confirmations.append(message)
        return self.answer

    def notify(self, kind, text):
        self.messages.append((kind, text))

    def download(self, artifact):
        self.downloads.append(artifact)
        return artifact

    def reload(self):
        self.reloads += 1


class MemoryStore:
    def __init__(self, data=None):
        self.data: dict[str, str] = dict(data or {})

    def get_item(self, key):
        return self.data.get(key)

    def set_item(self, key, value):
        self.data[key] = value

    def remove_item(self, key):
        self.data.pop(key, None)

    def keys(self):
        return list(self.data)


def make_row(day: int, name: str, *, employee_id=None, amount=10_000.0, members=10, investors=7, score=None):
    rate = investors / members * 100 if members else 0.0
    return PerformanceRow(
        work_date=date(2024, 1, day),
        employee_id=employee_id or name.lower(),
        employee_name=name,
        total_amount=amount,
        member_count=members,
        investor_count=investors,
        conversion_rate=rate,
        performance_score=score if score is not None else 50,
    )


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def declining_host():
    return FakeHost(confirm=False)


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def january_rows():
    return [
        make_row(3, "Ayşe", amount=120_000.0, members=40, investors=28, score=95),
        make_row(1, "Mehmet", amount=5_000.0, members=4, investors=2, score=20),
        make_row(1, "Ahmet", amount=60_000.0, members=25, investors=17, score=72),
        make_row(15, "Ahmet", amount=30_000.0, members=12, investors=8, score=55),
        make_row(31, "Mehmet", amount=15_000.0, members=8, investors=5, score=35),
    ]
