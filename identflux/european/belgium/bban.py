"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/european/belgium/bban.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Belgian Basic Bank Account Number (12 digits, modulo 97
                check) and its conversion into an IBAN.
------------------------------------------------------------------------------
"""

from functools import cached_property
from typing import Optional

from identflux.european.base import AbstractBeIdentification
from identflux.iban import IBAN
from identflux.utils.checksum import iban_check_digits, mod97_or_97


class BBAN(AbstractBeIdentification):
    """Belgian bank account number, paper form DDD-DDDDDDD-DD."""

    STANDARD_MIN_LENGTH = 12

    def _on_validate(self, identification: str) -> bool:
        return mod97_or_97(identification[:10]) == int(identification[10:])

    def _format_paper_version(self, cleaned: str) -> str:
        return f"{cleaned[:3]}-{cleaned[3:10]}-{cleaned[10:]}"

    @cached_property
    def as_iban(self) -> Optional[IBAN]:
        """
        Converts a valid BBAN into the Belgian IBAN.

        Returns:
            The IBAN, or None if the BBAN is invalid.
        """
        if not self.is_valid:
            return None
        country = self.two_iso_letter_country_code
        return IBAN(f"{country}{iban_check_digits(country, self.cleaned_version)}{self.cleaned_version}")
