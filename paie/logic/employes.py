"""
Employés : capacité minimale attendue par l'Entreprise et variantes concrètes.

L'Entreprise ne connaît que deux opérations :
- compute_salary() : salaire calculé (float)
- str(employe)     : forme affichable sur le bulletin
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .formatting import fmt_money


@runtime_checkable
class Employe(Protocol):
    """Tout objet offrant un salaire calculable et une forme texte."""

    def compute_salary(self) -> float: ...

    def __str__(self) -> str: ...


@dataclass(frozen=True)
class Salarie:
    """Employé au salaire mensuel fixe."""

    nom: str
    salaire_mensuel: float

    libelle = "Salarié"

    def compute_salary(self) -> float:
        return float(self.salaire_mensuel)

    def __str__(self) -> str:
        return f"{self.libelle} {self.nom} : {fmt_money(self.compute_salary())}"


@dataclass(frozen=True)
class Horaire:
    """Employé payé à l'heure (taux horaire x heures travaillées)."""

    nom: str
    taux_horaire: float
    heures: float

    libelle = "Horaire"

    def compute_salary(self) -> float:
        return float(self.taux_horaire) * float(self.heures)

    def __str__(self) -> str:
        return (
            f"{self.libelle} {self.nom} : {fmt_money(self.compute_salary())}"
            f" ({self.heures:g} h x {fmt_money(self.taux_horaire)})"
        )


@dataclass(frozen=True)
class Commercial:
    """Fixe + commission sur le chiffre d'affaires (taux entre 0 et 1)."""

    nom: str
    salaire_fixe: float
    chiffre_affaires: float
    taux_commission: float

    libelle = "Commercial"

    def compute_salary(self) -> float:
        return float(self.salaire_fixe) + float(self.chiffre_affaires) * float(
            self.taux_commission
        )

    def __str__(self) -> str:
        return f"{self.libelle} {self.nom} : {fmt_money(self.compute_salary())}"

