"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/european/belgium/rsz.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Belgian employer registration number of the National Social
                Security Office (RSZ/ONSS).
------------------------------------------------------------------------------
"""

from functools import cached_property
from typing import Optional

from identflux.european.base import AbstractBeIdentification

# Registration numbers handed out to temporary employers start with this digit
TEMPORARY_PREFIX = "5"


class RSZ(AbstractBeIdentification):
    """Employer number, layout DDDDDDDD-CC."""

    STANDARD_MIN_LENGTH = 10

    @staticmethod
    def _check_digits(registration: str) -> int:
        rest = 96 - (int(registration) * 100) % 97
        return 97 if rest == 0 else rest

    def _on_validate(self, identification: str) -> bool:
        return self._check_digits(identification[:8]) == int(identification[8:])

    def _format_paper_version(self, cleaned: str) -> str:
        return f"{cleaned[:8]}-{cleaned[8:]}"

    @cached_property
    def is_temporary(self) -> Optional[bool]:
        """True for a number of the temporary range; None if invalid."""
        if not self.is_valid:
            return None
        return self.cleaned_version.startswith(TEMPORARY_PREFIX)
