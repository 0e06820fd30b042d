"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/european/belgium/inss.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Belgian social security identification number (INSZ/NISS).
                Covers both national register numbers and bis numbers and
                derives birth date and sex where the number encodes them.
------------------------------------------------------------------------------
"""

from datetime import date
from functools import cached_property
from typing import Optional, Tuple

from identflux.european.base import AbstractBeIdentification
from identflux.models.types import Sex
from identflux.utils.checksum import mod97


class INSS(AbstractBeIdentification):
    """
    Belgian INSS, layout YYMMDDVVVCC.

    The check digits CC complement the first nine digits modulo 97. For
    people born in 2000 or later a leading '2' is prepended before the
    modulo is taken. Bis numbers add 20 (sex unknown) or 40 (sex known)
    to the month.
    """

    STANDARD_MIN_LENGTH = 11

    @staticmethod
    def _born_before_2000(identification: str) -> bool:
        return mod97(identification[:9]) == 97 - int(identification[9:])

    @staticmethod
    def _born_after_2000(identification: str) -> bool:
        return mod97("2" + identification[:9]) == 97 - int(identification[9:])

    def _on_validate(self, identification: str) -> bool:
        return self._born_before_2000(identification) or self._born_after_2000(identification)

    def _format_paper_version(self, cleaned: str) -> str:
        return f"{cleaned[0:2]}.{cleaned[2:4]}.{cleaned[4:6]}-{cleaned[6:9]}.{cleaned[9:11]}"

    @cached_property
    def is_bis_number(self) -> Optional[bool]:
        """True when the month field exceeds 12; None if invalid."""
        if not self.is_valid:
            return None
        return int(self.cleaned_version[2:4]) > 12

    @cached_property
    def is_national_number(self) -> Optional[bool]:
        if not self.is_valid:
            return None
        return not self.is_bis_number

    @cached_property
    def _birth_facts(self) -> Tuple[Optional[date], Optional[Sex]]:
        """
        Decodes birth date and sex.

        Returns:
            (birth_date, sex), each None when not encoded or not plausible.
        """
        if not self.is_valid:
            return None, None

        cleaned = self.cleaned_version
        century = 1900 if self._born_before_2000(cleaned) else 2000
        year = century + int(cleaned[0:2])
        month = int(cleaned[2:4])
        day = int(cleaned[4:6])

        # Month ranges: 0-19 regular, 20-39 bis (sex unknown), 40-59 bis (sex known)
        if month < 20:
            with_sex = True
        elif month < 40:
            month -= 20
            with_sex = False
        elif month < 60:
            month -= 40
            with_sex = True
        else:
            return None, None

        sex = self._decode_sex(cleaned[6:9]) if with_sex else None
        return self._decode_birth_date(year, month, day), sex

    @staticmethod
    def _decode_sex(sequence: str) -> Sex:
        number = int(sequence)
        if number == 0 or number == 999:
            return Sex.NOT_KNOWN
        return Sex.MALE if number % 2 == 1 else Sex.FEMALE

    @staticmethod
    def _decode_birth_date(year: int, month: int, day: int) -> Optional[date]:
        if not (1 <= month <= 12 and 1 <= day <= 31):
            return None
        try:
            birth_date = date(year, month, day)
        except ValueError:
            return None
        if birth_date > date.today():
            return None
        return birth_date

    @property
    def birth_date(self) -> Optional[date]:
        return self._birth_facts[0]

    @property
    def sex(self) -> Optional[Sex]:
        return self._birth_facts[1]
