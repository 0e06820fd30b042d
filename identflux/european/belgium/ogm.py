"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/european/belgium/ogm.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Belgian structured payment reference (OGM/VCS), written as
                +++DDD/DDDD/DDDDD+++ on transfer forms.
------------------------------------------------------------------------------
"""

from identflux.european.base import AbstractBeIdentification
from identflux.utils.checksum import mod97_or_97


class OGM(AbstractBeIdentification):
    """Structured communication of 10 digits followed by 2 check digits."""

    STANDARD_MIN_LENGTH = 12

    def _on_validate(self, identification: str) -> bool:
        return mod97_or_97(identification[:10]) == int(identification[10:])

    def _format_paper_version(self, cleaned: str) -> str:
        return f"+++{cleaned[:3]}/{cleaned[3:7]}/{cleaned[7:]}+++"
