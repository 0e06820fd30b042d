"""
------------------------------------------------------------------------------
Project:        IdentFlux
File:           identflux/bic.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Business Identifier Code (ISO 9362, SWIFT code). Structural
                validation only, there is no check digit.
------------------------------------------------------------------------------
"""

import re
from functools import cached_property
from typing import FrozenSet, Optional

from identflux.logger import log_rejection
from identflux.models.identification import AbstractIdentification

# ISO 3166-1 alpha-2 country codes, plus XK (Kosovo) which SWIFT assigns.
ISO_COUNTRY_CODES: FrozenSet[str] = frozenset("""
    AD AE AF AG AI AL AM AO AQ AR AS AT AU AW AX AZ BA BB BD BE BF BG BH BI BJ
    BL BM BN BO BQ BR BS BT BV BW BY BZ CA CC CD CF CG CH CI CK CL CM CN CO CR
    CU CV CW CX CY CZ DE DJ DK DM DO DZ EC EE EG EH ER ES ET FI FJ FK FM FO FR
    GA GB GD GE GF GG GH GI GL GM GN GP GQ GR GS GT GU GW GY HK HM HN HR HT HU
    ID IE IL IM IN IO IQ IR IS IT JE JM JO JP KE KG KH KI KM KN KP KR KW KY KZ
    LA LB LC LI LK LR LS LT LU LV LY MA MC MD ME MF MG MH MK ML MM MN MO MP MQ
    MR MS MT MU MV MW MX MY MZ NA NC NE NF NG NI NL NO NP NR NU NZ OM PA PE PF
    PG PH PK PL PM PN PR PS PT PW PY QA RE RO RS RU RW SA SB SC SD SE SG SH SI
    SJ SK SL SM SN SO SR SS ST SV SX SY SZ TC TD TF TG TH TJ TK TL TM TN TO TR
    TT TV TW TZ UA UG UM US UY UZ VA VC VE VG VI VN VU WF WS YE YT ZA ZM ZW XK
""".split())

BIC_PATTERN = re.compile(r"^(?P<bank>[A-Z]{4})(?P<country>[A-Z]{2})(?P<location>[A-Z0-9]{2})(?P<branch>[A-Z0-9]{3})?$")


class BIC(AbstractIdentification):
    """Business Identifier Code with 8 or 11 characters."""

    STANDARD_MIN_LENGTH = 8
    STANDARD_MAX_LENGTH = 11

    def _is_valid_char(self, ch: str) -> bool:
        return ch.isascii() and (ch.isdigit() or ch.isupper())

    def _on_validate(self, identification: str) -> bool:
        match = BIC_PATTERN.match(identification)
        if match is None:
            log_rejection("BIC", identification, "structure mismatch")
            return False
        if match.group("country") not in ISO_COUNTRY_CODES:
            log_rejection("BIC", identification, f"unknown country '{match.group('country')}'")
            return False
        return True

    def _part(self, name: str) -> Optional[str]:
        if not self.is_valid:
            return None
        return BIC_PATTERN.match(self.cleaned_version).group(name)

    @cached_property
    def bank_code(self) -> Optional[str]:
        return self._part("bank")

    @cached_property
    def country(self) -> Optional[str]:
        return self._part("country")

    @cached_property
    def location(self) -> Optional[str]:
        return self._part("location")

    @cached_property
    def branch(self) -> Optional[str]:
        """Branch code, None for the 8 character primary office form."""
        return self._part("branch")
