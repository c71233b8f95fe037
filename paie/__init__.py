"""Gestion d'un effectif d'employés et calcul de la masse salariale.

Le coeur est :class:`paie.logic.entreprise.Entreprise`, un conteneur
extensible d'employés capable d'agréger leurs salaires et d'imprimer un
récapitulatif des bulletins.
"""

from .logic.employes import Commercial, Employe, Horaire, Salarie
from .logic.entreprise import Entreprise

__version__ = "1.0.0"

__all__ = ["Entreprise", "Employe", "Salarie", "Horaire", "Commercial"]
