"""
Entreprise : effectif extensible d'employés et masse salariale.

- Conserve l'ordre d'ajout des employés
- Capacité initiale de 4, doublée lorsque l'effectif est plein
- Agrège les salaires calculés par chaque employé

Non thread-safe : une Entreprise partagée entre threads doit être protégée
par l'appelant (verrou externe).
"""

from __future__ import annotations

import logging
import sys
from typing import Generic, Iterator, Optional, TextIO, TypeVar

from .employes import Employe
from .formatting import fmt_money

logger = logging.getLogger(__name__)

CAPACITE_INITIALE = 4

TITRE_BULLETIN = "=== Payslip Summary ==="
LIBELLE_TOTAL = "Total payroll: "

E = TypeVar("E", bound=Employe)


class Entreprise(Generic[E]):
    """Effectif ordonné d'employés avec capacité doublée à la demande."""

    def __init__(self, capacite_initiale: int = CAPACITE_INITIALE):
        if capacite_initiale < 1:
            raise ValueError(
                f"Capacité initiale invalide: {capacite_initiale} (minimum 1)"
            )
        self._employes: list[E] = []
        self._capacite = capacite_initiale
        self._reallocations = 0

    # ========================
    # AJOUT
    # ========================

    def add(self, employe: E) -> None:
        """Ajoute un employé en fin d'effectif.

        Si l'effectif est plein, la capacité double avant l'insertion.

        Raises:
            TypeError: si ``employe`` est None
        """
        if employe is None:
            raise TypeError("Impossible d'ajouter un employé absent (None)")

        if len(self._employes) == self._capacite:
            self._capacite *= 2
            self._reallocations += 1
            logger.debug(
                f"Capacité doublée: {self._capacite // 2} -> {self._capacite} "
                f"({self._reallocations} réallocation(s))"
            )
        self._employes.append(employe)

    # ========================
    # AGRÉGATS
    # ========================

    def total_payroll(self) -> float:
        """Masse salariale : somme des salaires, dans l'ordre d'ajout."""
        total = 0.0
        for employe in self._employes:
            total += employe.compute_salary()
        return total

    def payslip_lines(self, devise: Optional[str] = None) -> Iterator[str]:
        """Lignes du récapitulatif des bulletins (titre, employés, total)."""
        yield TITRE_BULLETIN
        for employe in self._employes:
            yield str(employe)
        yield f"{LIBELLE_TOTAL}{fmt_money(self.total_payroll(), devise)}"

    def print_payslips(
        self, stream: Optional[TextIO] = None, devise: Optional[str] = None
    ) -> None:
        """Affiche le récapitulatif des bulletins sur ``stream`` (stdout par défaut)."""
        out = stream if stream is not None else sys.stdout
        for line in self.payslip_lines(devise):
            print(line, file=out)

    # ========================
    # INTROSPECTION
    # ========================

    @property
    def count(self) -> int:
        return len(self._employes)

    @property
    def capacity(self) -> int:
        return self._capacite

    @property
    def reallocations(self) -> int:
        """Nombre de fois où la capacité a doublé depuis la création."""
        return self._reallocations

    @property
    def employes(self) -> tuple[E, ...]:
        return tuple(self._employes)

    def __len__(self) -> int:
        return len(self._employes)

    def __iter__(self) -> Iterator[E]:
        return iter(self._employes)

    def __repr__(self) -> str:
        return (
            f"Entreprise(count={self.count}, capacity={self._capacite}, "
            f"reallocations={self._reallocations})"
        )
