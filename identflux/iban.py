"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/iban.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    International Bank Account Number (ISO 13616). Validates the
                country specific length and structure as well as the
                modulo 97 check digits.
------------------------------------------------------------------------------
"""

import re
from functools import cached_property
from typing import Dict, Optional, Pattern, Tuple, TYPE_CHECKING

from identflux.logger import log_rejection
from identflux.models.identification import AbstractIdentification
from identflux.utils.checksum import iban_remainder
from identflux.utils.formatting import group_by

if TYPE_CHECKING:
    from identflux.european.belgium.bban import BBAN

# Country code -> (total length, BBAN structure) as published in the IBAN registry.
# Structure items: n = digits, a = upper case letters, c = alphanumeric.
IBAN_COUNTRY_FORMATS: Dict[str, Tuple[int, str]] = {
    "AL": (28, "8n,16c"),
    "AD": (24, "8n,12c"),
    "AT": (20, "16n"),
    "AZ": (28, "4c,20n"),
    "BH": (22, "4a,14c"),
    "BY": (28, "4c,20n"),
    "BE": (16, "12n"),
    "BA": (20, "16n"),
    "BR": (29, "23n,1a,1c"),
    "BG": (22, "4a,6n,8c"),
    "CR": (22, "18n"),
    "HR": (21, "17n"),
    "CY": (28, "8n,16c"),
    "CZ": (24, "20n"),
    "DK": (18, "14n"),
    "DO": (28, "4a,20n"),
    "TL": (23, "19n"),
    "EE": (20, "16n"),
    "FO": (18, "14n"),
    "FI": (18, "14n"),
    "FR": (27, "10n,11c,2n"),
    "GE": (22, "2c,16n"),
    "DE": (22, "18n"),
    "GI": (23, "4a,15c"),
    "GR": (27, "7n,16c"),
    "GL": (18, "14n"),
    "GT": (28, "4c,20c"),
    "HU": (28, "24n"),
    "IS": (26, "22n"),
    "IE": (22, "4c,14n"),
    "IL": (23, "19n"),
    "IT": (27, "1a,10n,12c"),
    "JO": (30, "4a,22n"),
    "KZ": (20, "3n,13c"),
    "XK": (20, "4n,10n,2n"),
    "KW": (30, "4a,22c"),
    "LV": (21, "4a,13c"),
    "LB": (28, "4n,20c"),
    "LI": (21, "5n,12c"),
    "LT": (20, "16n"),
    "LU": (20, "3n,13c"),
    "MK": (19, "3n,10c,2n"),
    "MT": (31, "4a,5n,18c"),
    "MR": (27, "23n"),
    "MU": (30, "4a,19n,3a"),
    "MC": (27, "10n,11c,2n"),
    "MD": (24, "2c,18c"),
    "ME": (22, "18n"),
    "NL": (18, "4a,10n"),
    "NO": (15, "11n"),
    "PK": (24, "4c,16n"),
    "PS": (29, "4c,21n"),
    "PL": (28, "24n"),
    "PT": (25, "21n"),
    "QA": (29, "4a,21c"),
    "RO": (24, "4a,16c"),
    "SM": (27, "1a,10n,12c"),
    "SA": (24, "2n,18c"),
    "RS": (22, "18n"),
    "SK": (24, "20n"),
    "SI": (19, "15n"),
    "ES": (24, "20n"),
    "SE": (24, "20n"),
    "CH": (21, "5n,12c"),
    "TN": (24, "20n"),
    "TR": (26, "5n,17c"),
    "AE": (23, "3n,16n"),
    "GB": (22, "4a,14n"),
    "VG": (24, "4c,16n"),
}

_STRUCTURE_CLASSES = {
    "n": r"\d",
    "a": r"[A-Z]",
    "c": r"[0-9A-Za-z]",
}


def _structure_to_regex(country_code: str, structure: str) -> Pattern:
    """
    Translates a registry structure like '4a,14n' into an anchored regex
    covering the whole IBAN, check digits included.
    """
    parts = []
    for item in structure.split(","):
        count, kind = item[:-1], item[-1]
        parts.append(f"{_STRUCTURE_CLASSES[kind]}{{{count}}}")
    return re.compile(rf"^{country_code}\d{{2}}{''.join(parts)}$")


_COUNTRY_RULES: Dict[str, Tuple[int, Pattern]] = {
    code: (length, _structure_to_regex(code, structure))
    for code, (length, structure) in IBAN_COUNTRY_FORMATS.items()
}


class IBAN(AbstractIdentification):
    """International Bank Account Number."""

    STANDARD_MIN_LENGTH = 14
    STANDARD_MAX_LENGTH = 34

    def _is_valid_char(self, ch: str) -> bool:
        return ch.isascii() and (ch.isdigit() or ch.isupper())

    def _on_validate(self, identification: str) -> bool:
        rule = _COUNTRY_RULES.get(identification[:2])
        if rule is None:
            log_rejection("IBAN", identification, f"unknown country '{identification[:2]}'")
            return False

        length, pattern = rule
        if len(identification) != length:
            log_rejection("IBAN", identification, f"expected {length} characters")
            return False
        if not pattern.match(identification):
            log_rejection("IBAN", identification, "structure mismatch")
            return False
        return iban_remainder(identification) == 1

    def _format_paper_version(self, cleaned: str) -> str:
        return group_by(cleaned, 4)

    @cached_property
    def country(self) -> Optional[str]:
        """ISO 3166 country code of a valid IBAN."""
        return self.cleaned_version[:2] if self.is_valid else None

    @cached_property
    def bban(self) -> Optional[str]:
        """The national account number part of a valid IBAN."""
        return self.cleaned_version[4:] if self.is_valid else None

    @cached_property
    def as_bban(self) -> Optional["BBAN"]:
        """
        Converts a valid Belgian IBAN into its BBAN.

        Returns:
            The BBAN, or None for invalid or non Belgian IBANs.
        """
        if not self.is_valid or self.country != "BE":
            return None
        from identflux.european.belgium.bban import BBAN
        return BBAN(self.cleaned_version[4:16])
