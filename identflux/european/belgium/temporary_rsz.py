"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/european/belgium/temporary_rsz.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Temporary employer registration number (tijdelijk RSZ).
------------------------------------------------------------------------------
"""

from identflux.european.belgium.rsz import RSZ, TEMPORARY_PREFIX


class TemporaryRSZ(RSZ):
    """RSZ number restricted to the temporary range."""

    def _on_validate(self, identification: str) -> bool:
        return identification.startswith(TEMPORARY_PREFIX) and super()._on_validate(identification)
