"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/utils/validation.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Utility predicates for quick checks on plain strings, e.g.
                in pydantic validators of free-form models.
------------------------------------------------------------------------------
"""

from typing import Optional

from identflux.bic import BIC
from identflux.iban import IBAN


def validate_iban(iban: Optional[str]) -> bool:
    """
    Validates an IBAN according to ISO 13616.

    Args:
        iban: The IBAN string to validate, spaces and lower case allowed.

    Returns:
        True if the IBAN is valid, False otherwise.
    """
    if not iban:
        return False
    return IBAN(iban).is_valid


def validate_bic(bic: Optional[str]) -> bool:
    """
    Validates a BIC (8 or 11 characters, known country).
    """
    if not bic:
        return False
    return BIC(bic).is_valid


def normalize_iban(iban: Optional[str]) -> Optional[str]:
    """Returns the electronic form of a valid IBAN, None otherwise."""
    return IBAN(iban).electronic_version
