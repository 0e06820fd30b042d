"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/european/france/nir.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    French social security number (NIR, numéro de sécurité
                sociale). Validates sex, month, place of birth and the
                modulo 97 key; derives sex and birth month.
------------------------------------------------------------------------------
"""

import re
from datetime import date
from functools import cached_property
from typing import Optional

from identflux.european.base import AbstractFrIdentification
from identflux.logger import log_rejection
from identflux.models.types import Sex
from identflux.utils.formatting import split_at

NIR_PATTERN = re.compile(r"^[0-9]{6}[0-9AB][0-9]{8}$")

MALE_DIGITS = "137"
FEMALE_DIGITS = "248"
VALID_SEX_DIGITS = MALE_DIGITS + FEMALE_DIGITS

# 62 and 63 are issued when the month of birth is unknown
VALID_MONTHS = frozenset(list(range(1, 13)) + [62, 63])

# Corsica departments and their numeric replacement in the key computation
CORSICA_REPLACEMENTS = {"2A": "19", "2B": "18"}

# S YY MM PPPPP OOO KK
PAPER_GROUPS = (1, 2, 2, 5, 3, 2)


def _in_range(value: str, low: int, high: int) -> bool:
    return value.isdigit() and low <= int(value) <= high


def _is_metropolitan_birth_place(place: str) -> bool:
    """Department 01-19, 21-99 or Corsica, followed by a commune 001-990."""
    department, commune = place[:2], place[2:]
    valid_department = (
        department in CORSICA_REPLACEMENTS
        or _in_range(department, 1, 19)
        or _in_range(department, 21, 95)
        or _in_range(department, 96, 99)
    )
    return valid_department and _in_range(commune, 1, 990)


def _is_overseas_birth_place(place: str) -> bool:
    """Overseas department 970-989 followed by a commune 01-90."""
    return _in_range(place[:3], 970, 989) and _in_range(place[3:], 1, 90)


def _is_foreign_birth_place(place: str) -> bool:
    """Born abroad: department 99 followed by a country code 001-990."""
    return place[:2] == "99" and _in_range(place[2:], 1, 990)


class NIR(AbstractFrIdentification):
    """
    French NIR, layout S YY MM PPPPP OOO KK.

    S is the sex digit, YY and MM year and month of birth, PPPPP the place
    of birth (department and commune), OOO the birth order and KK the key.
    """

    STANDARD_MIN_LENGTH = 15

    def _is_valid_char(self, ch: str) -> bool:
        return (ch.isascii() and ch.isdigit()) or ch in "AB"

    def _on_validate(self, identification: str) -> bool:
        if not NIR_PATTERN.match(identification):
            return False
        if identification[0] not in VALID_SEX_DIGITS:
            log_rejection("NIR", identification, "unknown sex digit")
            return False
        if int(identification[3:5]) not in VALID_MONTHS:
            log_rejection("NIR", identification, "month out of range")
            return False

        place = identification[5:10]
        if not (
            _is_metropolitan_birth_place(place)
            or _is_overseas_birth_place(place)
            or _is_foreign_birth_place(place)
        ):
            log_rejection("NIR", identification, f"unknown place of birth '{place}'")
            return False

        number = identification[:13]
        for department, replacement in CORSICA_REPLACEMENTS.items():
            number = number.replace(department, replacement)
        return int(number) % 97 == int(identification[13:])

    def _format_paper_version(self, cleaned: str) -> str:
        return " ".join(split_at(cleaned, PAPER_GROUPS))

    @cached_property
    def sex(self) -> Optional[Sex]:
        if not self.is_valid:
            return None
        digit = self.cleaned_version[0]
        if digit in MALE_DIGITS:
            return Sex.MALE
        if digit in FEMALE_DIGITS:
            return Sex.FEMALE
        return Sex.NOT_KNOWN

    @cached_property
    def birth_date(self) -> Optional[date]:
        """First day of the month of birth; None if the month is unknown."""
        if not self.is_valid:
            return None
        month = int(self.cleaned_version[3:5])
        if not 1 <= month <= 12:
            return None
        birth_date = date(1900 + int(self.cleaned_version[1:3]), month, 1)
        if birth_date > date.today():
            return None
        return birth_date
