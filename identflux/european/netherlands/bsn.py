"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/european/netherlands/bsn.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Dutch citizen service number (Burgerservicenummer) with the
                eleven test.
------------------------------------------------------------------------------
"""

from datetime import date
from typing import Optional

from identflux.european.base import AbstractNlIdentification
from identflux.models.types import Sex


class BSN(AbstractNlIdentification):
    """
    BSN of 9 digits; 8 digit numbers are padded with a leading zero.
    The number does not encode birth date or sex.
    """

    STANDARD_MIN_LENGTH = 8
    STANDARD_MAX_LENGTH = 9

    def _on_validate(self, identification: str) -> bool:
        if len(identification) != 9:
            return False

        # Eleven test: weights 9..2, the last digit counts negatively
        total = 0
        for position, ch in enumerate(identification[:8]):
            total += int(ch) * (9 - position)
        total -= int(identification[8])
        return total % 11 == 0

    @property
    def birth_date(self) -> Optional[date]:
        return None

    @property
    def sex(self) -> Optional[Sex]:
        return None
