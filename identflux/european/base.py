"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/european/base.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Base classes for identifiers issued by a single European
                country. They carry the ISO country code and the numeric
                defaults (digits only, left padded with zeros).
------------------------------------------------------------------------------
"""

from identflux.models.identification import AbstractIdentification


class AbstractEuropeanIdentification(AbstractIdentification):
    """Identification issued by one European country."""

    TWO_ISO_LETTER_COUNTRY_CODE: str = ""

    @property
    def two_iso_letter_country_code(self) -> str:
        return self.TWO_ISO_LETTER_COUNTRY_CODE


class AbstractBeIdentification(AbstractEuropeanIdentification):
    """Belgian identification."""
    TWO_ISO_LETTER_COUNTRY_CODE = "BE"
    PADDING_CHARACTER = "0"


class AbstractFrIdentification(AbstractEuropeanIdentification):
    """French identification."""
    TWO_ISO_LETTER_COUNTRY_CODE = "FR"
    PADDING_CHARACTER = "0"


class AbstractNlIdentification(AbstractEuropeanIdentification):
    """Dutch identification."""
    TWO_ISO_LETTER_COUNTRY_CODE = "NL"
    PADDING_CHARACTER = "0"
