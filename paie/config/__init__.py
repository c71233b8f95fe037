"""Configuration de l'application (environnement, logging)."""
