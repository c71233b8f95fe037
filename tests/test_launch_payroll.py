from __future__ import annotations

import logging

from openpyxl import load_workbook

from paie import launch_payroll

CSV = "type,nom,salaire\nsalarie,Dupont,1000\nsalarie,Martin,2500.5\nsalarie,Durand,300.25\n"


def test_main_prints_payslips(tmp_path, capsys):
    path = tmp_path / "effectif.csv"
    path.write_text(CSV, encoding="utf-8")

    code = launch_payroll.main([str(path)])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == [
        "=== Payslip Summary ===",
        "Salarié Dupont : 1000.00€",
        "Salarié Martin : 2500.50€",
        "Salarié Durand : 300.25€",
        "Total payroll: 3800.75€",
    ]


def test_main_devise_resume_and_export(tmp_path, capsys):
    path = tmp_path / "effectif.csv"
    path.write_text(CSV, encoding="utf-8")
    output = tmp_path / "bulletins.xlsx"

    code = launch_payroll.main(
        [str(path), "--devise", " EUR", "--resume", "--export", str(output)]
    )

    out = capsys.readouterr().out
    assert code == 0
    assert "Total payroll: 3800.75 EUR" in out
    assert "Masse salariale" in out
    assert "3 employé(s) exporté(s)" in out
    assert load_workbook(output)["Bulletins"]["B7"].value == "Durand"


def test_main_reports_translated_error(tmp_path, capsys):
    code = launch_payroll.main([str(tmp_path / "absent.csv")])

    err = capsys.readouterr().err
    assert code == 1
    assert "Erreur: Le fichier sélectionné n'existe pas" in err
    assert "Solution:" in err


def test_main_rejects_bad_export_suffix(tmp_path, capsys):
    path = tmp_path / "effectif.csv"
    path.write_text(CSV, encoding="utf-8")

    code = launch_payroll.main([str(path), "--export", str(tmp_path / "x.pdf")])

    assert code == 1
    assert "n'est pas supporté" in capsys.readouterr().err


def test_main_reports_corrupt_workbook(tmp_path, capsys):
    path = tmp_path / "effectif.xlsx"
    path.write_text("pas un classeur", encoding="utf-8")

    code = launch_payroll.main([str(path)])

    err = capsys.readouterr().err
    assert code == 1
    assert "Erreur: Le fichier est illisible ou endommagé" in err
    assert "Solution:" in err


def test_main_logs_application_banner(tmp_path, monkeypatch, caplog):
    monkeypatch.setenv("APPLICATION_NAME", "Paie RH")
    monkeypatch.setenv("APP_ENV", "recette")
    path = tmp_path / "effectif.csv"
    path.write_text(CSV, encoding="utf-8")
    caplog.set_level(logging.INFO)

    assert launch_payroll.main([str(path)]) == 0

    assert f"Démarrage Paie RH (recette): {path}" in caplog.text
