import logging
from datetime import datetime
from pathlib import Path

import pandas as pd
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

logger = logging.getLogger(__name__)

EXPORT_SUFFIXES = (".csv", ".xlsx")


def df_detail_employe(entreprise):
    """Une ligne par employé, dans l'ordre d'ajout."""
    rows = []
    for rang, employe in enumerate(entreprise, start=1):
        nom = getattr(employe, "nom", None)
        rows.append(
            {
                "Rang": rang,
                "Employé": nom if nom is not None else str(employe),
                "Type": getattr(employe, "libelle", type(employe).__name__),
                "Salaire": float(employe.compute_salary()),
            }
        )
    return pd.DataFrame(rows, columns=["Rang", "Employé", "Type", "Salaire"])


def df_resume(entreprise):
    detail = df_detail_employe(entreprise)
    salaires = detail["Salaire"]
    nb = len(detail)

    return pd.DataFrame(
        {
            "Indicateur": [
                "Nb employés",
                "Masse salariale",
                "Salaire moyen",
                "Salaire min",
                "Salaire max",
            ],
            "Valeur": [
                nb,
                entreprise.total_payroll(),
                float(salaires.mean()) if nb else 0.0,
                float(salaires.min()) if nb else 0.0,
                float(salaires.max()) if nb else 0.0,
            ],
        }
    )


def export_detail(entreprise, filepath, title="Bulletins de paie"):
    """Exporte le détail par employé en CSV ou Excel selon l'extension."""
    filepath = Path(filepath)
    suffix = filepath.suffix.lower()
    if suffix not in EXPORT_SUFFIXES:
        raise ValueError(f"Format d'export non supporté: {suffix or filepath.name}")

    df = df_detail_employe(entreprise)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".csv":
        df.to_csv(filepath, index=False, encoding="utf-8")
    else:
        _export_excel_generic(df, filepath, title, entreprise.total_payroll())
    logger.info(f"Export {suffix}: {len(df)} employé(s) -> {filepath}")
    return filepath


def _export_excel_generic(df, filepath, title, total):
    if df.empty:
        df = pd.DataFrame({"Info": ["Aucun employé"]})

    with pd.ExcelWriter(filepath, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name="Bulletins", index=False, startrow=3)

        ws = writer.sheets["Bulletins"]

        if len(df.columns) > 1:
            ws.merge_cells(
                start_row=1, start_column=1, end_row=1, end_column=len(df.columns)
            )
        title_cell = ws.cell(1, 1)
        title_cell.value = title
        title_cell.font = Font(size=16, bold=True, color="1e3a8a")
        title_cell.alignment = Alignment(horizontal="center", vertical="center")

        if len(df.columns) > 1:
            ws.merge_cells(
                start_row=2, start_column=1, end_row=2, end_column=len(df.columns)
            )
        subtitle_cell = ws.cell(2, 1)
        subtitle_cell.value = f"Masse salariale: {total:.2f} | Généré le {datetime.now().strftime('%Y-%m-%d %H:%M')}"
        subtitle_cell.font = Font(size=10, italic=True)
        subtitle_cell.alignment = Alignment(horizontal="center")

        header_fill = PatternFill(
            start_color="d1d5db", end_color="d1d5db", fill_type="solid"
        )
        border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin"),
        )

        for col_idx, col_name in enumerate(df.columns, 1):
            cell = ws.cell(4, col_idx)
            cell.fill = header_fill
            cell.font = Font(bold=True)
            cell.border = border
            cell.alignment = Alignment(horizontal="center")

            max_length = max(
                len(str(col_name)), int(df[col_name].astype(str).str.len().max())
            )
            ws.column_dimensions[get_column_letter(col_idx)].width = min(
                max_length + 2, 50
            )

        for row_idx in range(5, 5 + len(df)):
            for col_idx, col_name in enumerate(df.columns, 1):
                cell = ws.cell(row_idx, col_idx)
                cell.border = border
                if "salaire" in col_name.lower():
                    cell.number_format = "#,##0.00"
