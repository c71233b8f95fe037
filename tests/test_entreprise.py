from __future__ import annotations

import io
import math

import pytest

from paie import Commercial, Entreprise, Horaire, Salarie
from paie.logic.entreprise import CAPACITE_INITIALE


def test_new_entreprise_is_empty():
    entreprise = Entreprise()

    assert entreprise.count == 0
    assert len(entreprise) == 0
    assert entreprise.capacity == CAPACITE_INITIALE == 4
    assert entreprise.reallocations == 0
    assert entreprise.total_payroll() == 0


@pytest.mark.parametrize("n", [0, 1, 4, 5, 8, 9, 17, 100])
def test_count_matches_number_of_adds(make_employee, n):
    entreprise = Entreprise()
    for i in range(n):
        entreprise.add(make_employee(f"E{i}", 1.0))

    assert entreprise.count == n
    assert entreprise.count <= entreprise.capacity


def test_growth_preserves_insertion_order(make_employee):
    employees = [make_employee(f"E{i}", float(i)) for i in range(5)]
    entreprise = Entreprise()
    for employe in employees[:4]:
        entreprise.add(employe)
    assert entreprise.capacity == 4

    entreprise.add(employees[4])

    assert entreprise.capacity == 8
    assert list(entreprise) == employees
    assert entreprise.employes == tuple(employees)


def test_reallocations_follow_doubling(make_employee):
    for k in range(0, 70):
        entreprise = Entreprise()
        for i in range(k):
            entreprise.add(make_employee(f"E{i}", 0.0))

        expected = 0 if k <= 4 else math.ceil(math.log2(k / 4))
        assert entreprise.reallocations == expected, k
        assert entreprise.capacity == 4 * 2**expected


def test_custom_initial_capacity(make_employee):
    entreprise = Entreprise(capacite_initiale=1)
    for i in range(3):
        entreprise.add(make_employee(f"E{i}", 0.0))

    assert entreprise.capacity == 4
    assert entreprise.reallocations == 2


def test_invalid_initial_capacity():
    with pytest.raises(ValueError):
        Entreprise(capacite_initiale=0)


def test_add_none_is_rejected():
    entreprise = Entreprise()

    with pytest.raises(TypeError):
        entreprise.add(None)
    assert entreprise.count == 0


def test_total_payroll_known_salaries(make_employee):
    entreprise = Entreprise()
    for salary in (1000.0, 2500.50, 300.25):
        entreprise.add(make_employee("x", salary))

    assert entreprise.total_payroll() == pytest.approx(3800.75)
    assert isinstance(entreprise.total_payroll(), float)


def test_total_payroll_calls_each_employee_once_in_order():
    order = []

    class Tracking:
        def __init__(self, name):
            self.name = name

        def compute_salary(self):
            order.append(self.name)
            return 10

    entreprise = Entreprise()
    for name in "abcdef":
        entreprise.add(Tracking(name))

    assert entreprise.total_payroll() == 60.0
    assert order == list("abcdef")


def test_total_payroll_mixed_kinds():
    entreprise = Entreprise()
    entreprise.add(Salarie("Dupont", 2500))
    entreprise.add(Horaire("Martin", 12.5, 10))
    entreprise.add(Commercial("Durand", 1500, 40000, 0.05))

    assert entreprise.total_payroll() == pytest.approx(2500 + 125 + 3500)


def test_print_payslips_format(make_employee):
    entreprise = Entreprise()
    for name, salary in (("A", 1000.0), ("B", 2500.0), ("C", 300.0)):
        entreprise.add(make_employee(name, salary))

    out = io.StringIO()
    entreprise.print_payslips(out)

    assert out.getvalue().splitlines() == [
        "=== Payslip Summary ===",
        "A (1000.0)",
        "B (2500.0)",
        "C (300.0)",
        "Total payroll: 3800.00€",
    ]


def test_print_payslips_defaults_to_stdout(capsys):
    entreprise = Entreprise()
    entreprise.add(Salarie("Dupont", 1234.5))

    entreprise.print_payslips(devise=" EUR")

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "=== Payslip Summary ==="
    assert lines[-1] == "Total payroll: 1234.50 EUR"


def test_print_payslips_empty(capsys):
    Entreprise().print_payslips()

    assert capsys.readouterr().out.splitlines() == [
        "=== Payslip Summary ===",
        "Total payroll: 0.00€",
    ]


def test_print_payslips_uses_configured_devise(monkeypatch, capsys):
    monkeypatch.setenv("PAIE_DEVISE", " $")
    entreprise = Entreprise()
    entreprise.add(Salarie("Dupont", 10))

    entreprise.print_payslips()

    assert capsys.readouterr().out.splitlines()[-1] == "Total payroll: 10.00 $"


class BrokenSalary:
    def compute_salary(self):
        raise RuntimeError("barème indisponible")

    def __str__(self):
        return "Broken"


class BrokenDisplay:
    def compute_salary(self):
        return 1.0

    def __str__(self):
        raise LookupError("affichage impossible")


def test_salary_failure_propagates(make_employee):
    entreprise = Entreprise()
    entreprise.add(make_employee("ok", 1.0))
    entreprise.add(BrokenSalary())

    with pytest.raises(RuntimeError, match="barème indisponible"):
        entreprise.total_payroll()
    with pytest.raises(RuntimeError, match="barème indisponible"):
        entreprise.print_payslips(io.StringIO())


def test_display_failure_propagates():
    entreprise = Entreprise()
    entreprise.add(BrokenDisplay())

    with pytest.raises(LookupError):
        entreprise.print_payslips(io.StringIO())
    assert entreprise.total_payroll() == 1.0


def test_repr_mentions_capacity(make_employee):
    entreprise = Entreprise()
    for i in range(5):
        entreprise.add(make_employee(str(i), 0.0))

    assert repr(entreprise) == "Entreprise(count=5, capacity=8, reallocations=1)"
