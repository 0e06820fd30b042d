"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/models/types.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Centralized enumeration and type definitions.
------------------------------------------------------------------------------
"""

from enum import Enum


class Sex(str, Enum):
    """Sex encoded in a national number."""
    MALE = "MALE"
    FEMALE = "FEMALE"
    NOT_KNOWN = "NOT_KNOWN"


class IdentificationKind(str, Enum):
    """Enumeration of supported identification schemes."""
    # 1. International
    IBAN = "IBAN"
    BIC = "BIC"

    # 2. Belgium
    BBAN = "BBAN"
    INSS = "INSS"
    KBO = "KBO"
    VAT = "VAT"
    COMPANY_LOCAL_UNIT_NUMBER = "COMPANY_LOCAL_UNIT_NUMBER"
    RSZ = "RSZ"
    TEMPORARY_RSZ = "TEMPORARY_RSZ"
    OGM = "OGM"
    DMFA = "DMFA"

    # 3. France
    NIR = "NIR"

    # 4. Netherlands
    BSN = "BSN"
