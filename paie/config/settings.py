"""Central configuration and environment bootstrap for the application.

Responsibilities:
- bootstrap environment from paie/.env (python-dotenv)
- expose the currency suffix used on payslips (PAIE_DEVISE)
- provide small logging configuration helper
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

_logger = logging.getLogger(__name__)

DEFAULT_APPLICATION_NAME = "Paie"
DEFAULT_APP_ENV = "production"
DEFAULT_DEVISE = "€"
DEFAULT_LOG_LEVEL = "INFO"


def bootstrap_env(app_root: Optional[str] = None) -> None:
    """Load .env file located in paie/ if present and configure basic logging.

    This function is safe to call multiple times. Variables already present in
    the process environment win over the file.
    """
    if app_root is None:
        # package path (this file lives in paie/config)
        app_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

    env_path = os.path.join(app_root, ".env")
    loaded = False
    if os.path.exists(env_path):
        loaded = load_dotenv(env_path, override=False)

    configure_logging(get_log_level())

    if loaded:
        _logger.info(f"Chargé .env depuis: {env_path}")
    else:
        _logger.debug("Aucun fichier .env trouvé dans paie/ (c'est OK en production)")


def get_application_name() -> str:
    return os.getenv("APPLICATION_NAME", DEFAULT_APPLICATION_NAME)


def get_app_env() -> str:
    return os.getenv("APP_ENV", DEFAULT_APP_ENV)


def app_banner() -> str:
    """Short "name (env)" label logged when the application starts."""
    return f"{get_application_name()} ({get_app_env()})"


def get_devise() -> str:
    """Return the currency suffix appended to formatted amounts."""
    return os.getenv("PAIE_DEVISE", DEFAULT_DEVISE)


def get_log_level() -> int:
    """Return the logging level configured by PAIE_LOG_LEVEL (INFO if unknown)."""
    name = os.getenv("PAIE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.INFO


def configure_logging(level: int = logging.INFO) -> None:
    """Basic logging configuration used by the application.

    Sets a short timestamped format if no handlers are configured yet.
    """
    if logging.getLogger().handlers:
        # Assume logging already configured
        return
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    logging.basicConfig(level=level, format=fmt, datefmt="%Y-%m-%d %H:%M:%S")
    _logger.debug("Logging initialisé")


__all__ = [
    "bootstrap_env",
    "configure_logging",
    "get_devise",
    "get_log_level",
    "get_application_name",
    "get_app_env",
    "app_banner",
]
