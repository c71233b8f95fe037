#!/usr/bin/env python3
"""
Point d'entrée ligne de commande : affiche le récapitulatif des bulletins
d'un effectif lu depuis un fichier CSV ou Excel.

Exemples:
    paie-bulletin effectif.csv
    paie-bulletin effectif.xlsx --devise " EUR" --export bulletins.xlsx
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import settings
from .logic.reports import df_resume, export_detail
from .services.error_messages import translate_error
from .services.import_employes import load_roster

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paie-bulletin",
        description="Affiche les bulletins de paie et la masse salariale d'un effectif.",
    )
    parser.add_argument("file", type=Path, help="Fichier d'effectif (.csv, .xlsx)")
    parser.add_argument(
        "--devise",
        help="Suffixe monétaire (défaut: PAIE_DEVISE ou €)",
    )
    parser.add_argument(
        "--export", type=Path, help="Exporter le détail par employé (.csv ou .xlsx)"
    )
    parser.add_argument(
        "--resume", action="store_true", help="Afficher aussi le tableau de synthèse"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Logs détaillés (DEBUG)"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings.bootstrap_env()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    logger.info(f"Démarrage {settings.app_banner()}: {args.file}")

    try:
        entreprise = load_roster(args.file)
        entreprise.print_payslips(devise=args.devise)

        if args.resume:
            print()
            print(df_resume(entreprise).to_string(index=False))

        if args.export:
            written = export_detail(entreprise, args.export)
            print(f"\n{entreprise.count} employé(s) exporté(s) vers {written}")
    except (OSError, ValueError) as exc:
        logger.debug("Échec du traitement", exc_info=True)
        message, solution = translate_error(exc)
        print(f"Erreur: {message}", file=sys.stderr)
        print(f"Solution: {solution}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
