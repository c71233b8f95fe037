import pytest


@pytest.fixture(autouse=True)
def _default_devise(monkeypatch):
    # Les montants attendus dans les tests utilisent la devise par défaut (€)
    monkeypatch.delenv("PAIE_DEVISE", raising=False)


class FixedSalary:
    """Employé minimal : salaire connu, affichage simple."""

    def __init__(self, name, salary):
        self.name = name
        self.salary = salary
        self.calls = 0

    def compute_salary(self):
        self.calls += 1
        return self.salary

    def __str__(self):
        return f"{self.name} ({self.salary})"


@pytest.fixture
def make_employee():
    return FixedSalary
