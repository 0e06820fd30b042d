"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/logger.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Centralized logging for IdentFlux. Supports console/file
                output, component-specific levels and a dedicated channel
                for tracing why an identifier was rejected.
------------------------------------------------------------------------------
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Dict, TYPE_CHECKING

if TYPE_CHECKING:
    from identflux.config import AppConfig

# Root logger for the entire library
APP_LOGGER_NAME = "identflux"

# Default format for log messages
DEFAULT_FORMAT = "%(asctime)s [%(levelname).4s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# The library stays silent unless the host application configures logging
logging.getLogger(APP_LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    component_levels: Optional[Dict[str, str]] = None
) -> None:
    """
    Sets up the logging configuration of the library.

    Args:
        level: The default logging level (DEBUG, INFO, WARNING, ERROR).
        log_file: Path to a file where logs should be saved.
        component_levels: Dict mapping component names (e.g. 'iban') to levels.
    """
    root = logging.getLogger(APP_LOGGER_NAME)

    # Remove existing handlers to avoid duplicates on re-setup
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DATE_FORMAT)

    # 1. Console Handler (Stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    # 2. File Handler (Optional)
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_path), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    # 3. Apply Component Overrides
    if component_levels:
        for component, cmp_level in component_levels.items():
            set_component_level(component, cmp_level)


def configure_logging(app_config: "AppConfig", log_to_file: bool = True) -> None:
    """
    Applies the logging preferences stored in an AppConfig.

    Args:
        app_config: The configuration holding level and component overrides.
        log_to_file: Whether to also write to the configured log file.
    """
    log_file = str(app_config.get_log_file_path()) if log_to_file else None
    setup_logging(
        level=app_config.get_log_level(),
        log_file=log_file,
        component_levels=app_config.get_log_components()
    )


def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger instance for a specific component.
    Namespaced under 'identflux.<name>'.
    """
    if name == APP_LOGGER_NAME or name.startswith(APP_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")


def set_component_level(component: str, level: str) -> None:
    """
    Dynamically changes the log level for a specific component.
    """
    logger = get_logger(component)
    numeric_level = getattr(logging, level.upper(), None)
    if isinstance(numeric_level, int):
        logger.setLevel(numeric_level)
        logger.propagate = True


def log_rejection(scheme: str, value: Optional[str], reason: str) -> None:
    """
    Specialized helper for tracing rejected identifiers.
    Logged at DEBUG level on 'identflux.validation.<scheme>'.
    """
    logger = get_logger(f"validation.{scheme.lower()}")
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"{scheme} rejected {value!r}: {reason}")
