"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/european/belgium/kbo.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Belgian enterprise number of the Crossroads Bank for
                Enterprises (KBO/BCE).
------------------------------------------------------------------------------
"""

from identflux.european.base import AbstractBeIdentification
from identflux.utils.checksum import mod97


class KBO(AbstractBeIdentification):
    """
    Enterprise number, 10 digits starting with 0 or 1.
    The last two digits are 97 minus the first eight modulo 97.
    """

    STANDARD_MIN_LENGTH = 10
    VALID_FIRST_CHARACTERS = "01"

    def _is_valid_first_char(self, ch: str) -> bool:
        return ch in self.VALID_FIRST_CHARACTERS

    def _on_validate(self, identification: str) -> bool:
        if not self._is_valid_first_char(identification[0]):
            return False
        return 97 - mod97(identification[:8]) == int(identification[8:])

    def _format_paper_version(self, cleaned: str) -> str:
        return f"{cleaned[:4]}.{cleaned[4:7]}.{cleaned[7:]}"
