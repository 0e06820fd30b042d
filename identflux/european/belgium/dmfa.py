"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/european/belgium/dmfa.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Reference of a Belgian multifunctional social security
                declaration (DmfA) or provincial/local variant (DmfAPPL).
------------------------------------------------------------------------------
"""

import re
from functools import cached_property
from typing import Optional

from identflux.european.base import AbstractBeIdentification

DMFA_PATTERN = re.compile(r"^(DMFA|DPPL)(T|A|P)(?P<number>\d{9})(\d|[A-Z])$")


class DMFA(AbstractBeIdentification):
    """
    Declaration reference: DMFA or DPPL, a kind letter (T, A or P),
    nine digits and a trailing digit or letter. Never padded.
    """

    STANDARD_MIN_LENGTH = 15
    PADDING_CHARACTER = None

    def _is_valid_char(self, ch: str) -> bool:
        return ch.isascii() and (ch.isdigit() or ch.isupper())

    def _on_validate(self, identification: str) -> bool:
        return DMFA_PATTERN.match(identification) is not None

    @cached_property
    def as_number(self) -> Optional[int]:
        """The nine digit declaration number, None if invalid."""
        if not self.is_valid:
            return None
        return int(DMFA_PATTERN.match(self.cleaned_version).group("number"))
