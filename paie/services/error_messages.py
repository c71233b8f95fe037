#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Module de traduction des erreurs techniques en messages utilisateur simples
"""
import re
from typing import Optional, Tuple


def translate_error(
    error: Exception, error_message: Optional[str] = None
) -> Tuple[str, str]:
    """
    Traduit une erreur technique en message utilisateur simple.

    Args:
        error: Exception levée
        error_message: Message d'erreur (optionnel, sinon utilise str(error))

    Returns:
        Tuple (message_utilisateur, solution)
    """
    if error_message is None:
        error_message = str(error)

    error_type = type(error).__name__
    error_lower = error_message.lower()

    # ========== ERREURS FICHIER ==========

    if error_type == "FileNotFoundError" or "fichier introuvable" in error_lower:
        return (
            "Le fichier sélectionné n'existe pas. Vérifiez que le fichier n'a pas été déplacé ou supprimé.",
            "Vérifier le chemin du fichier et réessayer.",
        )

    if "format de fichier non supporté" in error_lower or "format d'export" in error_lower:
        return (
            "Ce type de fichier n'est pas supporté. Utilisez un fichier Excel (.xlsx) ou CSV.",
            "Convertir le fichier au format Excel (.xlsx) ou CSV et réessayer.",
        )

    if "fichier illisible" in error_lower:
        return (
            "Le fichier est illisible ou endommagé. Il ne s'agit pas d'un classeur Excel ou d'un CSV texte valide.",
            "Ouvrir le fichier dans son application d'origine, l'enregistrer à nouveau en .xlsx ou .csv et réessayer.",
        )

    if "fichier vide" in error_lower:
        return (
            "Le fichier ne contient aucun employé.",
            "Ajouter au moins une ligne d'employé sous la ligne d'en-têtes.",
        )

    # ========== ERREURS COLONNES ==========

    if "colonne obligatoire" in error_lower or "colonne" in error_lower and "manquante" in error_lower:
        colonne_match = re.search(r"['\"]([^'\"]+)['\"]", error_message)
        colonne = colonne_match.group(1) if colonne_match else "requise"
        return (
            f"Le fichier ne contient pas toutes les colonnes nécessaires. La colonne '{colonne}' est manquante. Vérifiez que les colonnes suivantes sont présentes : type, nom, puis les montants du type d'employé.",
            "Vérifier les en-têtes du fichier et ajouter les colonnes manquantes.",
        )

    # ========== ERREURS DONNÉES ==========

    if "type manquant" in error_lower:
        return (
            "Certaines lignes n'ont pas de type d'employé. Types acceptés : salarie, horaire, commercial.",
            "Renseigner la colonne 'type' pour chaque employé et réessayer.",
        )

    if "type inconnu" in error_lower:
        return (
            "Certaines lignes ont un type d'employé inconnu. Types acceptés : salarie, horaire, commercial.",
            "Corriger la colonne 'type' dans le fichier et réessayer.",
        )

    if "nom manquant" in error_lower:
        return (
            "Certaines lignes n'ont pas de nom. Tous les employés doivent avoir un nom.",
            "Ajouter les noms manquants dans le fichier.",
        )

    if "montant invalide" in error_lower:
        return (
            "Certains montants ne sont pas des nombres valides. Vérifiez que les montants sont bien des nombres (ex: 1500,50).",
            "Corriger les montants dans le fichier. Utilisez une virgule ou un point comme séparateur décimal (ex: 1500,50).",
        )

    # ========== ERREUR GÉNÉRIQUE ==========

    return (
        f"Une erreur inattendue est survenue ({error_type}).",
        "Relancer avec --verbose pour afficher le détail technique.",
    )
