"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/european/belgium/company_local_unit_number.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Belgian establishment unit number (vestigingseenheidsnummer).
                Uses the enterprise number check with first digit 2 to 8,
                and knows the official fictive numbers.
------------------------------------------------------------------------------
"""

from typing import FrozenSet, Optional, Union

from identflux.european.belgium.kbo import KBO

# Numbers handed out for establishments that are not registered (yet)
VALID_FICTIVE_NUMBERS: FrozenSet[str] = frozenset({
    "8999999993",
    "8999999104",
    "8999999203",
    "8999999302",
    "8999999401",
    "8999999005",
    "8999999894",
})


class CompanyLocalUnitNumber(KBO):
    """Establishment unit number, paper form D.DDD.DDD.DDD. Never padded."""

    PADDING_CHARACTER = None
    VALID_FIRST_CHARACTERS = "2345678"

    def _format_paper_version(self, cleaned: str) -> str:
        return f"{cleaned[0]}.{cleaned[1:4]}.{cleaned[4:7]}.{cleaned[7:]}"

    @staticmethod
    def valid_fictive_numbers() -> FrozenSet[str]:
        return VALID_FICTIVE_NUMBERS

    @classmethod
    def is_fictive_number(cls, identification: Optional[Union[str, "CompanyLocalUnitNumber"]]) -> bool:
        """
        Checks whether a number is one of the official fictive numbers.

        Args:
            identification: Raw string or CompanyLocalUnitNumber.

        Returns:
            True for a valid fictive number.
        """
        if not isinstance(identification, CompanyLocalUnitNumber):
            identification = cls(identification)
        return identification.is_valid and identification.cleaned_version in VALID_FICTIVE_NUMBERS
