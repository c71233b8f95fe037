"""
Import d'effectif : construit une Entreprise depuis un fichier CSV ou Excel.

Colonnes attendues (casse et accents ignorés) :
- type : salarie | horaire | commercial
- nom
- salarie    : salaire
- horaire    : taux, heures
- commercial : salaire, chiffre_affaires, commission

Usage:
    entreprise = load_roster("effectif.xlsx")
    entreprise.print_payslips()
"""

import csv
import logging
import re
import unicodedata
from pathlib import Path
from typing import Union
from zipfile import BadZipFile

import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

from ..logic.employes import Commercial, Horaire, Salarie
from ..logic.entreprise import Entreprise
from ..utils.parsers import parse_amount

logger = logging.getLogger(__name__)

CSV_ENCODINGS = ["utf-8-sig", "utf-8", "latin-1"]
EXCEL_SUFFIXES = [".xlsx", ".xlsm"]

REQUIRED_COLUMNS = ["type", "nom"]

# type normalisé -> colonnes de montants requises
AMOUNT_COLUMNS = {
    "salarie": ["salaire"],
    "horaire": ["taux", "heures"],
    "commercial": ["salaire", "chiffre_affaires", "commission"],
}

MAX_REPORTED_ERRORS = 10

# caractères de contrôle hors tabulation et fins de ligne
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")


class ImportEmployesError(ValueError):
    """Fichier d'effectif illisible ou invalide."""


def _norm(s) -> str:
    s = unicodedata.normalize("NFKD", str(s)).encode("ascii", "ignore").decode("ascii")
    return re.sub(r"[\s\-]+", "_", s.strip().lower())


def load_roster(path: Union[str, Path]) -> Entreprise:
    """Lit le fichier et retourne une Entreprise contenant ses employés (ordre du fichier)."""
    df = read_employee_file(path)
    entreprise = Entreprise()
    for employe in build_employees(df):
        entreprise.add(employe)
    logger.info(
        f"OK: {entreprise.count} employé(s) importé(s) depuis {Path(path).name}"
    )
    return entreprise


def read_employee_file(path: Union[str, Path]) -> pd.DataFrame:
    """Parse le fichier (CSV ou Excel) et normalise les noms de colonnes."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Fichier introuvable: {path}")

    suffix = path.suffix.lower()
    if suffix == ".csv":
        df = _read_csv_robust(path)
    elif suffix in EXCEL_SUFFIXES:
        try:
            df = pd.read_excel(path, engine="openpyxl", dtype=object)
        except (BadZipFile, InvalidFileException) as e:
            raise ImportEmployesError(f"Fichier illisible: {path.name} ({e})") from e
    else:
        raise ImportEmployesError(f"Format de fichier non supporté: {suffix or path.name}")

    df = df.dropna(how="all")
    if df.empty:
        raise ImportEmployesError("Fichier vide")

    df.columns = [_norm(c) for c in df.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ImportEmployesError(f"Colonne obligatoire manquante: '{missing[0]}'")

    logger.info(f"OK: Fichier parsé ({suffix}): {len(df)} lignes")
    return df


def _read_csv_robust(path: Path) -> pd.DataFrame:
    """Parse CSV avec détection d'encodage et séparateur."""
    for encoding in CSV_ENCODINGS:
        try:
            with open(path, "r", encoding=encoding, newline="") as f:
                sample = f.read(2048)
                if _CONTROL_CHARS.search(sample):
                    raise ImportEmployesError(
                        f"Fichier illisible: {path.name} (contenu non textuel)"
                    )
                if not sample.strip():
                    raise ImportEmployesError("Fichier vide")
                f.seek(0)
                try:
                    delimiter = csv.Sniffer().sniff(sample, delimiters=",;\t").delimiter
                except csv.Error:
                    delimiter = ","
                df = pd.read_csv(f, delimiter=delimiter, dtype=str)
        except UnicodeDecodeError as e:
            logger.debug(f"Tentative encoding {encoding} échouée: {e}")
            continue
        logger.debug(f"CSV lu: encoding={encoding}, delimiter='{delimiter}'")
        return df

    raise ImportEmployesError("Impossible de lire le CSV avec les encodages testés")


def build_employees(df: pd.DataFrame) -> list:
    """Convertit chaque ligne en employé ; les erreurs sont regroupées."""
    employees = []
    errors = []

    for idx, row in enumerate(df.to_dict(orient="records"), start=1):
        raw_type = row.get("type")
        nom = row.get("nom")
        if nom is None or pd.isna(nom) or not str(nom).strip():
            errors.append(f"Ligne {idx}: nom manquant")
            continue
        nom = str(nom).strip()

        if raw_type is None or pd.isna(raw_type) or not str(raw_type).strip():
            errors.append(f"Ligne {idx}: type manquant")
            continue
        kind = _norm(raw_type)

        if kind not in AMOUNT_COLUMNS:
            errors.append(f"Ligne {idx}: type inconnu '{row.get('type')}'")
            continue

        amounts = {}
        for col in AMOUNT_COLUMNS[kind]:
            if col not in row:
                errors.append(f"Ligne {idx}: colonne '{col}' manquante")
                continue
            value = parse_amount(row[col])
            if value is None:
                errors.append(f"Ligne {idx}: montant invalide pour '{col}'")
                continue
            amounts[col] = value
        if len(amounts) != len(AMOUNT_COLUMNS[kind]):
            continue

        if kind == "salarie":
            employees.append(Salarie(nom, amounts["salaire"]))
        elif kind == "horaire":
            employees.append(Horaire(nom, amounts["taux"], amounts["heures"]))
        else:
            employees.append(
                Commercial(
                    nom,
                    amounts["salaire"],
                    amounts["chiffre_affaires"],
                    amounts["commission"],
                )
            )

    if errors:
        raise ImportEmployesError(
            "Validation échouée:\n" + "\n".join(errors[:MAX_REPORTED_ERRORS])
        )
    return employees
