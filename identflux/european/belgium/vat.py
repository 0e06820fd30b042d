"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/european/belgium/vat.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Belgian VAT number. Same digits and check as the enterprise
                number, written with the country prefix.
------------------------------------------------------------------------------
"""

from identflux.european.belgium.kbo import KBO


class VAT(KBO):
    """Belgian VAT number, paper form BE DDDD.DDD.DDD."""

    def _format_paper_version(self, cleaned: str) -> str:
        return f"{self.two_iso_letter_country_code} {super()._format_paper_version(cleaned)}"
